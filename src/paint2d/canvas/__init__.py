"""Canvas grid, cursor and palette."""

from .cursor import Cursor, Direction
from .grid import Canvas, Cell
from .palette import Color, Palette

__all__ = [
    "Canvas",
    "Cell",
    "Color",
    "Cursor",
    "Direction",
    "Palette",
]
