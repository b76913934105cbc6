"""Menu widgets: push buttons, radio buttons for map choice and their layout."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from .textutil import atoi, iter_lines

MAP_DIRECTORY = "maps/"
RADIO_ORIGIN = (20, 20)
RADIO_SPACING = 30
# The clickable area of a radio button reaches this far around its centre.
RADIO_REACH_BEFORE = 7
RADIO_REACH_AFTER = 10
MAIN_BUTTON_ROWS = (0.40, 0.55, 0.70, 0.85)


class ButtonEvent(enum.IntEnum):
    """What a button reports after one frame of mouse input."""

    NONE = 0
    PRESSED = 1
    RELEASED = 2


@dataclass
class Button:
    """A rectangular push button placed at (x, y)."""

    x: int
    y: int
    width: int
    height: int
    pressed: bool = False

    def _contains(self, cursor_x: int, cursor_y: int) -> bool:
        return (
            self.x <= cursor_x <= self.x + self.width
            and self.y <= cursor_y <= self.y + self.height
        )

    def update(
        self, cursor_x: int, cursor_y: int, left_click: bool, active: bool
    ) -> ButtonEvent:
        """Track the mouse over the button and report a press or a release.

        A release is reported when the mouse button comes up over a button
        that was pressed. Nothing happens while ``active`` is false.
        """
        if not active:
            return ButtonEvent.NONE
        inside = self._contains(cursor_x, cursor_y)
        if inside and left_click:
            self.pressed = True
            return ButtonEvent.PRESSED
        if inside and not left_click and self.pressed:
            return ButtonEvent.RELEASED
        if not inside or not left_click:
            self.pressed = False
        return ButtonEvent.NONE


@dataclass
class RadioButton:
    """A radio button naming one map file, drawn centred on (x, y)."""

    x: int
    y: int
    name: str
    checked: bool = False

    @property
    def map_path(self) -> str:
        """The map file this button selects."""
        return MAP_DIRECTORY + self.name

    def _hit(self, cursor_x: int, cursor_y: int) -> bool:
        return (
            self.x - RADIO_REACH_BEFORE <= cursor_x <= self.x + RADIO_REACH_AFTER
            and self.y - RADIO_REACH_BEFORE <= cursor_y <= self.y + RADIO_REACH_AFTER
        )


def select_radio(
    buttons: list[RadioButton], cursor_x: int, cursor_y: int, left_click: bool
) -> int | None:
    """Check the radio button under a left click and uncheck all others.

    Returns the index of the button that was checked, or None when the click
    hit no button (the selection is then left unchanged).
    """
    if not left_click:
        return None
    hits = [index for index, button in enumerate(buttons) if button._hit(cursor_x, cursor_y)]
    if not hits:
        return None
    for index, button in enumerate(buttons):
        button.checked = index in hits
    return hits[-1]


def load_radio_buttons(path: str | Path, current_map: str) -> list[RadioButton]:
    """Read a map list file and build one radio button per listed map.

    The first line holds the number of maps, each following line a map file
    name. Buttons are stacked downward from the top-left corner; the one whose
    map is ``current_map`` starts checked. A missing or empty file gives no
    buttons.
    """
    try:
        with open(path, encoding="utf-8") as stream:
            lines = list(iter_lines(stream))
    except FileNotFoundError:
        return []
    if not lines:
        return []
    count = max(atoi(lines[0]), 0)
    x, y = RADIO_ORIGIN
    buttons = []
    for offset, name in enumerate(lines[1 : count + 1]):
        button = RadioButton(x=x, y=y + offset * RADIO_SPACING, name=name)
        button.checked = button.map_path == current_map
        buttons.append(button)
    return buttons


def layout_main_buttons(
    width: int, height: int, button_width: int, button_height: int
) -> list[Button]:
    """Place the four main-menu buttons centred horizontally, one per row."""
    x = width // 2 - button_width // 2
    return [
        Button(
            x=x,
            y=int(height * row - button_height // 2),
            width=button_width,
            height=button_height,
        )
        for row in MAIN_BUTTON_ROWS
    ]