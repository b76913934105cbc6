"""Locations of the image files the game loads."""

from __future__ import annotations

from pathlib import Path

from .textutil import atoi, iter_lines

TEXTURE_LIST = "textures.txt"
TEXTURE_DIRECTORY = "textures"
GUI_IMAGES = {
    "title": "gui/Title.xpm",
    "toolbar": "gui/gui.xpm",
    "selection": "gui/gui_select.xpm",
}
MAIN_BUTTONS = ("play", "map", "edit", "quit")
EDIT_BUTTONS = ("yes", "no")


def button_image(name: str, pressed: bool) -> str:
    """Return the image file of a menu button in its up or down state."""
    return f"button/{name}_{'down' if pressed else 'up'}.xpm"


def read_texture_list(path: str | Path) -> tuple[int, list[str]]:
    """Read a texture list: a toolbar texture count, then one file per line.

    Returns the count from the first line and the listed file names.
    """
    with open(path, encoding="utf-8") as stream:
        lines = list(iter_lines(stream))
    if not lines:
        raise ValueError(f"texture list {path} is empty")
    return atoi(lines[0]), lines[1:]


def texture_paths(path: str | Path, directory: str | Path = TEXTURE_DIRECTORY) -> list[Path]:
    """Return the paths of the textures named in the list at ``path``."""
    _, names = read_texture_list(path)
    return [Path(directory) / name for name in names]