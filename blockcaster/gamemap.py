"""Block maps: parsing rows of digits, cell access and saving to text."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class MapFormatError(ValueError):
    """Raised when map text is not rows of space-separated digits."""


def parse_row(line: str) -> list[int]:
    """Parse a line of space-separated non-negative integers.

    Any character other than an ASCII digit or a space raises MapFormatError.
    """
    values: list[int] = []
    digits: list[str] = []
    for char in line:
        if "0" <= char <= "9":
            digits.append(char)
        elif char == " ":
            if digits:
                values.append(int("".join(digits)))
                digits.clear()
        else:
            raise MapFormatError(f"unexpected character {char!r} in map row")
    if digits:
        values.append(int("".join(digits)))
    return values


@dataclass
class GameMap:
    """A rectangular grid of block ids, indexed as ``game_map[x, y]``."""

    rows: list[list[int]]
    name: str | None = None

    def __post_init__(self) -> None:
        if not self.rows:
            raise MapFormatError("map has no rows")
        width = len(self.rows[0])
        if any(len(row) != width for row in self.rows):
            raise MapFormatError("map rows differ in length")

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def _cell(self, key: tuple[float, float]) -> tuple[int, int]:
        x, y = (int(v) for v in key)
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} map")
        return x, y

    def __getitem__(self, key: tuple[float, float]) -> int:
        x, y = self._cell(key)
        return self.rows[y][x]

    def __setitem__(self, key: tuple[float, float], value: int) -> None:
        x, y = self._cell(key)
        self.rows[y][x] = value

    def to_text(self) -> str:
        """Render the map as lines of space-separated cells, no final newline.

        Cells are single characters: only the first character of each value
        is written.
        """
        return "\n".join(" ".join(str(cell)[0] for cell in row) for row in self.rows)

    def save(self, path: str | Path | None = None) -> None:
        """Write the map text to ``path``, or to the map's own name."""
        target = path if path is not None else self.name
        if target is None:
            raise ValueError("no path given and the map has no name")
        Path(target).write_text(self.to_text())