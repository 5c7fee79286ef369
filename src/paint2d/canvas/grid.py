"""Color grid backing the painting surface."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .palette import Color

# ``None`` is the empty (transparent) cell, distinct from ``Color.BLACK``.
Cell = Optional[Color]


class Canvas:
    """``width x height`` grid of cells addressed as ``(x, y)``."""

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Canvas must be at least 1x1, got {width}x{height}")
        self._width = width
        self._height = height
        self._cells: List[List[Cell]] = _blank(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def extent(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> Cell:
        self._check(x, y)
        return self._cells[y][x]

    def paint(self, x: int, y: int, color: Color) -> None:
        self._check(x, y)
        self._cells[y][x] = Color(color)

    def erase(self, x: int, y: int) -> None:
        self._check(x, y)
        self._cells[y][x] = None

    def clear(self) -> None:
        self._cells = _blank(self._width, self._height)

    def resize(self, width: int, height: int) -> None:
        """Change the extent, keeping every cell whose coordinates survive."""

        if width < 1 or height < 1:
            raise ValueError(f"Canvas must be at least 1x1, got {width}x{height}")
        resized = _blank(width, height)
        for y in range(min(height, self._height)):
            keep = min(width, self._width)
            resized[y][:keep] = self._cells[y][:keep]
        self._cells = resized
        self._width = width
        self._height = height

    def rows(self) -> Iterator[Tuple[Cell, ...]]:
        for row in self._cells:
            yield tuple(row)

    def painted_count(self) -> int:
        return sum(1 for row in self._cells for cell in row if cell is not None)

    def _check(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise IndexError(
                f"({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def __repr__(self) -> str:
        return f"Canvas({self._width}x{self._height}, painted={self.painted_count()})"


def _blank(width: int, height: int) -> List[List[Cell]]:
    return [[None] * width for _ in range(height)]


__all__ = ["Canvas", "Cell"]
