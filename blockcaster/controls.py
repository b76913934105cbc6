"""Keyboard and mouse event handlers that update the game state."""

from __future__ import annotations

from .state import GameState

KEY_ESCAPE = 65307
KEY_TURN_LEFT = 113
KEY_TURN_RIGHT = 100
KEY_FORWARD = 122
KEY_BACKWARD = 115
KEY_EDITOR_ON = 97
KEY_EDITOR_OFF = 101

MOUSE_LEFT = 1
MOUSE_RIGHT = 3
MOUSE_WHEEL_DOWN = 4
MOUSE_WHEEL_UP = 5

_KEY_FIELDS = {
    KEY_TURN_LEFT: "a",
    KEY_TURN_RIGHT: "d",
    KEY_FORWARD: "w",
    KEY_BACKWARD: "s",
    KEY_EDITOR_ON: "q",
    KEY_EDITOR_OFF: "e",
}


class QuitRequested(Exception):
    """Raised when the player asks to leave the game."""


def key_press(state: GameState, keycode: int) -> None:
    """Handle a key going down.

    Escape asks to save the map while editing, otherwise quits.
    """
    if keycode == KEY_ESCAPE:
        if state.edit_menu:
            state.save_map = True
        else:
            raise QuitRequested()
    name = _KEY_FIELDS.get(keycode)
    if name is not None:
        setattr(state.keys, name, True)


def key_release(state: GameState, keycode: int) -> None:
    """Handle a key coming up."""
    name = _KEY_FIELDS.get(keycode)
    if name is not None:
        setattr(state.keys, name, False)


def mouse_press(state: GameState, button: int) -> None:
    """Handle a mouse button press or wheel step."""
    if button == MOUSE_LEFT:
        state.keys.left_click = True
    elif button == MOUSE_RIGHT:
        state.keys.right_click = True
    elif button == MOUSE_WHEEL_UP:
        state.keys.mouse_wheel_up = True
    elif button == MOUSE_WHEEL_DOWN:
        state.keys.mouse_wheel_down = True


def mouse_release(state: GameState, button: int) -> None:
    """Handle a mouse button release."""
    if button == MOUSE_LEFT:
        state.keys.left_click = False
    elif button == MOUSE_RIGHT:
        state.keys.right_click = False


def mouse_move(state: GameState, x: int, y: int) -> None:
    """Record the cursor position."""
    state.cursor = (x, y)