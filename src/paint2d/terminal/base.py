"""Terminal capability consumed by the canvas engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple

from paint2d.canvas import Color
from paint2d.engine.events import Event


class Terminal(ABC):
    """Screen, input and output primitives the engine draws with.

    Coordinates are ``(x, y)`` with the origin in the top-left corner.
    Output primitives may buffer; nothing is guaranteed on screen before
    :meth:`flush`. Any ``OSError`` from a primitive is fatal to the caller.
    """

    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """Current viewport as ``(width, height)``."""

    @abstractmethod
    def enter_exclusive_mode(self) -> None:
        """Switch to the alternate screen."""

    @abstractmethod
    def leave_exclusive_mode(self) -> None:
        """Return to the normal screen and its scrollback."""

    @abstractmethod
    def set_raw_input(self, enabled: bool) -> None:
        """Toggle per-keystroke input; ``False`` restores the prior mode."""

    def set_cursor_visible(self, visible: bool) -> None:
        del visible

    def set_cursor_glyph(self, style: Optional[str]) -> None:
        del style

    @abstractmethod
    def poll_events(self, timeout: float) -> Sequence[Event]:
        """Wait up to ``timeout`` seconds and return every pending event in order."""

    @abstractmethod
    def move_write_cursor(self, x: int, y: int) -> None:
        """Position the output cursor."""

    @abstractmethod
    def write_text(self, text: str) -> None:
        """Write ``text`` at the output cursor with the current style."""

    @abstractmethod
    def set_foreground(self, color: Color) -> None:
        """Set the foreground color for subsequent writes."""

    @abstractmethod
    def set_background(self, color: Color) -> None:
        """Set the background color for subsequent writes."""

    @abstractmethod
    def reset_style(self) -> None:
        """Drop any colors set since the last reset."""

    @abstractmethod
    def clear_screen(self) -> None:
        """Blank the whole screen."""

    @abstractmethod
    def flush(self) -> None:
        """Push buffered output to the device."""


__all__ = ["Terminal"]
