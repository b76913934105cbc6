"""Game logic for a grid-based first-person block game with a block editor."""

__version__ = "0.1.0"
__all__ = [
    "actions",
    "assets",
    "color",
    "controls",
    "gamemap",
    "image",
    "menu",
    "state",
    "textutil",
]