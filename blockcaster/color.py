"""Packed 0xRRGGBB colours and their components."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit components."""

    r: int
    g: int
    b: int

    def to_int(self) -> int:
        """Pack the colour as 0xRRGGBB."""
        return create_rgb(self.r, self.g, self.b)


def create_rgb(r: float, g: float, b: float) -> int:
    """Pack components (truncated to integers) into 0xRRGGBB."""
    return int(b) | (int(g) << 8) | (int(r) << 16)


def int_to_rgb(color: int) -> Color:
    """Unpack the low 24 bits of ``color`` into its components."""
    return Color(
        r=(color & 0xFF0000) >> 16,
        g=(color & 0x00FF00) >> 8,
        b=color & 0x0000FF,
    )


def negative_color(color: Color) -> int:
    """Return the packed photographic negative of ``color``."""
    return create_rgb(255 - color.r, 255 - color.g, 255 - color.b)