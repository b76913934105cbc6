"""Game state: player camera, pressed keys and menu flags."""

from __future__ import annotations

from dataclasses import dataclass, field

from .gamemap import GameMap

# Horizontal camera coordinate of the screen's centre column.
CAMERA_X = 0.0
EDIT_DISTANCE = 3
START_DIRECTION = (-1.0, 0.0)
START_PLANE = (0.0, 0.66)


@dataclass
class Vector:
    """A 2D point or direction."""

    x: float
    y: float


@dataclass
class Keys:
    """Which keys and mouse buttons are currently active."""

    w: bool = False
    s: bool = False
    a: bool = False
    d: bool = False
    q: bool = False
    e: bool = False
    left_click: bool = False
    right_click: bool = False
    mouse_wheel_up: bool = False
    mouse_wheel_down: bool = False


@dataclass
class Player:
    """The camera and the player's editing state."""

    position: Vector
    direction: Vector = field(default_factory=lambda: Vector(*START_DIRECTION))
    plane: Vector = field(default_factory=lambda: Vector(*START_PLANE))
    editor: bool = False
    menu: bool = True
    explode: bool = False
    explosion_step: int = 0
    select_block: int = 0
    edit_distance: int = EDIT_DISTANCE
    old_block: Vector = field(default_factory=lambda: Vector(0, 0))
    preview_kept: bool = False
    tnt_block: tuple[int, int] | None = None


@dataclass
class GameState:
    """Everything the game loop reads and updates."""

    game_map: GameMap
    player: Player
    keys: Keys = field(default_factory=Keys)
    cursor: tuple[int, int] = (0, 0)
    edit_menu: bool = False
    map_menu: bool = False
    save_map: bool = False

    @classmethod
    def create(cls, game_map: GameMap, position: tuple[float, float]) -> "GameState":
        """Start a game on ``game_map`` with the camera at ``position``."""
        px, py = (float(v) for v in position)
        if not (0 <= px < game_map.width and 0 <= py < game_map.height):
            raise ValueError(f"start position ({px}, py={py}) is outside the map")
        dx, dy = START_DIRECTION
        plx, ply = START_PLANE
        old_block = Vector(
            int(px + dx * EDIT_DISTANCE + plx * CAMERA_X),
            int(py + dy * EDIT_DISTANCE + ply * CAMERA_X),
        )
        player = Player(position=Vector(px, py), old_block=old_block)
        return cls(game_map=game_map, player=player)