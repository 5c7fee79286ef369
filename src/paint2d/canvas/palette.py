"""Paint colors and the palette ring the user cycles through."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Tuple


class Color(str, Enum):
    """The eight ANSI colors every backend can render."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    @classmethod
    def parse(cls, name: str) -> "Color":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown color '{name}'") from None

    @property
    def ansi(self) -> int:
        """Index in the standard 0-7 ANSI color table."""

        return list(Color).index(self)

    @property
    def contrast(self) -> "Color":
        """Foreground that stays readable on top of this color."""

        if self in (Color.WHITE, Color.YELLOW, Color.CYAN, Color.GREEN):
            return Color.BLACK
        return Color.WHITE


class Palette:
    """Ordered ring of colors with one current selection."""

    def __init__(
        self,
        colors: Optional[Iterable[Color]] = None,
        *,
        current: Color = Color.RED,
    ) -> None:
        self._colors: Tuple[Color, ...] = tuple(colors or tuple(Color))
        if not self._colors:
            raise ValueError("Palette needs at least one color")
        self._index = self._colors.index(current) if current in self._colors else 0

    @property
    def colors(self) -> Tuple[Color, ...]:
        return self._colors

    @property
    def current(self) -> Color:
        return self._colors[self._index]

    def next(self) -> Color:
        self._index = (self._index + 1) % len(self._colors)
        return self.current

    def previous(self) -> Color:
        self._index = (self._index - 1) % len(self._colors)
        return self.current

    def select(self, number: int) -> Color:
        """Select by 1-based position; out-of-range numbers are ignored."""

        if 1 <= number <= len(self._colors):
            self._index = number - 1
        return self.current

    def __len__(self) -> int:
        return len(self._colors)


__all__ = ["Color", "Palette"]
