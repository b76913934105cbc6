"""Per-frame player actions: walking, turning, editing blocks and TNT."""

from __future__ import annotations

import math

from .state import CAMERA_X, GameState, Vector

WALK_SPEED = 0.08
TURN_SPEED = 0.05
TNT_BLOCK = 6
TNT_SLOT = 7
INVENTORY_SLOTS = 9
PLACEABLE_SLOTS = 7


def _target_point(state: GameState, distance: float) -> Vector:
    player = state.player
    return Vector(
        player.position.x + player.direction.x * distance + player.plane.x * CAMERA_X,
        player.position.y + player.direction.y * distance + player.plane.y * CAMERA_X,
    )


def target_cell(state: GameState, distance: float) -> tuple[int, int]:
    """Return the map cell ``distance`` units in front of the camera."""
    point = _target_point(state, distance)
    return int(point.x), int(point.y)


def walk(state: GameState, speed: float = WALK_SPEED) -> None:
    """Move forward or backward, each axis separately blocked by walls."""
    player = state.player
    game_map = state.game_map
    pos = player.position
    direction = player.direction
    for pressed, sign in ((state.keys.w, 1), (state.keys.s, -1)):
        if not pressed:
            continue
        step_x = sign * direction.x * speed
        if game_map[pos.x + step_x, pos.y] == 0:
            pos.x += step_x
        step_y = sign * direction.y * speed
        if game_map[pos.x, pos.y + step_y] == 0:
            pos.y += step_y


def rotate(state: GameState, angle: float) -> None:
    """Turn the camera direction and plane by ``angle`` radians."""
    player = state.player
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    for vector in (player.direction, player.plane):
        old_x = vector.x
        vector.x = vector.x * cos_a - vector.y * sin_a
        vector.y = old_x * sin_a + vector.y * cos_a


def rotate_view(state: GameState, speed: float = TURN_SPEED) -> None:
    """Turn left and/or right according to the held keys."""
    if state.keys.a:
        rotate(state, speed)
    if state.keys.d:
        rotate(state, -speed)


def break_wall(state: GameState) -> None:
    """Clear the targeted cell unless it lies on the map border."""
    x, y = target_cell(state, state.player.edit_distance)
    game_map = state.game_map
    if 0 < x < game_map.width - 1 and 0 < y < game_map.height - 1:
        game_map[x, y] = 0


def put_wall(state: GameState) -> None:
    """Keep the previewed block in place when the target is inside the map."""
    x, y = target_cell(state, state.player.edit_distance)
    game_map = state.game_map
    if 0 < x < game_map.width and 0 < y < game_map.height:
        state.player.preview_kept = True


def aim_tnt(state: GameState) -> None:
    """Look for a TNT block in the line of sight and arm the nearest one.

    The search walks from the edit distance toward the camera and stops as
    soon as a cell falls on or beyond the map border.
    """
    player = state.player
    game_map = state.game_map
    for distance in range(player.edit_distance, 0, -1):
        x, y = target_cell(state, distance)
        if x <= 0 or x >= game_map.width - 1 or y <= 0 or y >= game_map.height - 1:
            return
        if game_map[x, y] == TNT_BLOCK:
            player.explode = True
            player.tnt_block = (x, y)


def cycle_inventory(state: GameState) -> None:
    """Move the selection along the inventory bar with the mouse wheel."""
    player = state.player
    steps = []
    if state.keys.mouse_wheel_up:
        steps.append(-1)
    if state.keys.mouse_wheel_down:
        steps.append(1)
    for step in steps:
        player.select_block = (player.select_block + step) % INVENTORY_SLOTS
        if player.editor and player.select_block < PLACEABLE_SLOTS:
            state.game_map[player.old_block.x, player.old_block.y] = (
                player.select_block + 1
            )


def update_editor(state: GameState) -> None:
    """Move the preview block to the empty cell in front of the camera."""
    player = state.player
    game_map = state.game_map
    target = _target_point(state, player.edit_distance)
    if target.x <= 0 or target.x >= game_map.width:
        return
    if target.y <= 0 or target.y >= game_map.height:
        return
    old = player.old_block
    if target.x == old.x or target.y == old.y:
        return
    if game_map[target.x, target.y] != 0:
        return
    if not player.preview_kept:
        game_map[old.x, old.y] = 0
    if player.select_block < PLACEABLE_SLOTS:
        game_map[target.x, target.y] = player.select_block + 1
    player.old_block = Vector(target.x, target.y)
    player.preview_kept = False


def apply_actions(state: GameState) -> None:
    """Apply one frame of held input to the player and the map."""
    player = state.player
    keys = state.keys
    walk(state)
    rotate_view(state, TURN_SPEED)
    cycle_inventory(state)
    if keys.q:
        player.editor = True
    if keys.e:
        player.editor = False
    old = player.old_block
    if not player.editor and state.game_map[old.x, old.y] > 0:
        state.game_map[old.x, old.y] = 0
    if keys.right_click and player.editor:
        put_wall(state)
    if keys.left_click and player.editor:
        break_wall(state)
    if keys.right_click and not player.editor and player.select_block == TNT_SLOT:
        aim_tnt(state)
    keys.mouse_wheel_up = False
    keys.mouse_wheel_down = False