"""In-memory terminal that renders frames as Rich text for Textual."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from rich.style import Style
from rich.text import Text

from paint2d.canvas import Color
from paint2d.engine.events import Event
from paint2d.terminal.base import Terminal

Cell = Tuple[str, Optional[Color], Optional[Color]]  # (char, fg, bg)


def _noop_frame(_frame: Text) -> None:  # pragma: no cover - default hook
    return None


class TextualSurface(Terminal):
    """Collects draw calls into a cell grid and hands out whole frames.

    Textual owns the real screen and the input stream, so the mode toggles
    are no-ops and events reach the engine through the adapter instead of
    :meth:`poll_events`.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        on_frame: Callable[[Text], None] = _noop_frame,
    ) -> None:
        self.on_frame = on_frame
        self._width = max(1, width)
        self._height = max(1, height)
        self._cells: List[List[Cell]] = self._blank()
        self._x = 0
        self._y = 0
        self._fg: Optional[Color] = None
        self._bg: Optional[Color] = None
        self.last_frame: Optional[Text] = None

    def resize(self, width: int, height: int) -> None:
        self._width = max(1, width)
        self._height = max(1, height)
        self._cells = self._blank()

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def enter_exclusive_mode(self) -> None:
        return None

    def leave_exclusive_mode(self) -> None:
        return None

    def set_raw_input(self, enabled: bool) -> None:
        del enabled

    def poll_events(self, timeout: float) -> Sequence[Event]:
        del timeout
        return ()

    def move_write_cursor(self, x: int, y: int) -> None:
        self._x = x
        self._y = y

    def write_text(self, text: str) -> None:
        for char in text:
            if 0 <= self._y < self._height and 0 <= self._x < self._width:
                self._cells[self._y][self._x] = (char, self._fg, self._bg)
            self._x += 1

    def set_foreground(self, color: Color) -> None:
        self._fg = color

    def set_background(self, color: Color) -> None:
        self._bg = color

    def reset_style(self) -> None:
        self._fg = None
        self._bg = None

    def clear_screen(self) -> None:
        self._cells = self._blank()
        self._x = 0
        self._y = 0

    def flush(self) -> None:
        frame = self.render()
        self.last_frame = frame
        self.on_frame(frame)

    def render(self) -> Text:
        text = Text(no_wrap=True, overflow="crop")
        for y, row in enumerate(self._cells):
            if y:
                text.append("\n")
            for char, fg, bg in row:
                text.append(char, style=_style(fg, bg))
        return text

    def lines(self) -> List[str]:
        return ["".join(char for char, _fg, _bg in row) for row in self._cells]

    def cell(self, x: int, y: int) -> Cell:
        return self._cells[y][x]

    def _blank(self) -> List[List[Cell]]:
        return [[(" ", None, None)] * self._width for _ in range(self._height)]


def _style(fg: Optional[Color], bg: Optional[Color]) -> Style:
    return Style(
        color=fg.value if fg is not None else None,
        bgcolor=bg.value if bg is not None else None,
    )


__all__ = ["TextualSurface"]
