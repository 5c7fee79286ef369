"""Paint cursor with wrap-around movement over a bounded extent."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Directions a cursor can travel in."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def sign(self) -> int:
        return -1 if self in (Direction.LEFT, Direction.UP) else 1


class Cursor:
    """Position on a ``width x height`` grid.

    ``row`` is the horizontal index (``0 <= row < width``) and ``col`` the
    vertical one (``0 <= col < height``). Movement never leaves the grid: a
    step past an edge comes back in from the opposite edge.
    """

    __slots__ = ("row", "col", "_width", "_height")

    def __init__(self, width: int, height: int, *, row: int = 0, col: int = 0) -> None:
        _check_extent(width, height)
        self._width = width
        self._height = height
        self.row = row % width
        self.col = col % height

    @property
    def extent(self) -> Tuple[int, int]:
        return (self._width, self._height)

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def move(self, direction: Direction, distance: int = 1) -> Tuple[int, int]:
        if distance < 0:
            raise ValueError("distance cannot be negative")
        direction = Direction(direction)
        delta = direction.sign * distance
        if direction.horizontal:
            self.row = (self.row + delta) % self._width
        else:
            self.col = (self.col + delta) % self._height
        return self.position

    def resize(self, width: int, height: int) -> None:
        """Change the wrap bound; call :meth:`normalize` afterwards."""

        _check_extent(width, height)
        self._width = width
        self._height = height

    def normalize(self) -> Tuple[int, int]:
        # Zero-distance move on both axes.
        self.row %= self._width
        self.col %= self._height
        return self.position

    def __repr__(self) -> str:
        return (
            f"Cursor(row={self.row}, col={self.col}, "
            f"extent={self._width}x{self._height})"
        )


def _check_extent(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise ValueError(f"Cursor extent must be at least 1x1, got {width}x{height}")


__all__ = ["Direction", "Cursor"]
