"""In-memory framebuffers of packed 0xRRGGBB pixels and blitting helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

from .color import int_to_rgb, negative_color

_CURSOR_SIZE = 15


@dataclass
class Image:
    """A ``width`` x ``height`` grid of packed colours stored row by row.

    Negative pixel values mark transparent pixels in images used as sources.
    """

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        size = self.width * self.height
        if not self.pixels:
            self.pixels = [0] * size
        elif len(self.pixels) != size:
            raise ValueError(
                f"expected {size} pixels for a {self.width}x{self.height} image,"
                f" got {len(self.pixels)}"
            )

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return x + y * self.width

    def get(self, x: int, y: int) -> int:
        """Return the pixel at column ``x``, row ``y``."""
        return self.pixels[self._index(x, y)]

    def set(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at column ``x``, row ``y``."""
        self.pixels[self._index(x, y)] = color

    def clear(self) -> None:
        """Set every pixel to black."""
        self.pixels[:] = [0] * (self.width * self.height)

    def _put_clipped(self, x: int, y: int, color: int) -> None:
        if self._contains(x, y):
            self.pixels[x + y * self.width] = color


def blit_scaled(target: Image, source: Image, x: int, y: int, coef: int) -> None:
    """Draw ``source`` onto ``target`` at (x, y), each pixel enlarged ``coef`` times.

    Every source pixel covers ``coef`` rows and the ``coef`` columns just to the
    right of its cell origin; the very first source pixel also covers the
    origin column itself. Transparent (negative) pixels are skipped and
    anything falling outside ``target`` is clipped.
    """
    if coef < 1:
        return
    first = True
    for sy in range(source.height):
        for sx in range(source.width):
            color = source.get(sx, sy)
            start = 0 if first else 1
            first = False
            if color < 0:
                continue
            base_x = x + sx * coef
            base_y = y + sy * coef
            for dx in range(start, coef + 1):
                for dy in range(coef):
                    target._put_clipped(base_x + dx, base_y + dy, color)


def blit_at(target: Image, source: Image, x: int, y: int) -> None:
    """Copy every pixel of ``source`` onto ``target`` with its corner at (x, y)."""
    for sy in range(source.height):
        for sx in range(source.width):
            target._put_clipped(x + sx, y + sy, source.get(sx, sy))


def _invert(image: Image, x: int, y: int) -> None:
    if image._contains(x, y):
        image.set(x, y, negative_color(int_to_rgb(image.get(x, y))))


def draw_cursor(image: Image) -> None:
    """Invert a 15-pixel cross centred on ``image``, the centre inverted once."""
    cx = image.width // 2
    cy = image.height // 2
    half = _CURSOR_SIZE // 2
    for offset in range(_CURSOR_SIZE):
        _invert(image, cx - half + offset, cy)
    for offset in range(_CURSOR_SIZE):
        if offset != half:
            _invert(image, cx, cy - half + offset)