"""Terminal backend built on blessed."""

from __future__ import annotations

from contextlib import ExitStack
from typing import IO, Dict, List, Optional, Sequence, Tuple

from blessed import Terminal as BlessedScreen
from blessed.keyboard import Keystroke

from paint2d.canvas import Color
from paint2d.engine.events import Event, Interrupt, KeyPress, Resize

from .base import Terminal

CTRL_C = "\x03"

_SHIFT = ("shift",)

# blessed key names -> (code, modifiers)
KEY_NAMES: Dict[str, Tuple[str, Tuple[str, ...]]] = {
    "KEY_LEFT": ("left", ()),
    "KEY_RIGHT": ("right", ()),
    "KEY_UP": ("up", ()),
    "KEY_DOWN": ("down", ()),
    "KEY_SLEFT": ("left", _SHIFT),
    "KEY_SRIGHT": ("right", _SHIFT),
    "KEY_SUP": ("up", _SHIFT),
    "KEY_SDOWN": ("down", _SHIFT),
    "KEY_SR": ("up", _SHIFT),
    "KEY_SF": ("down", _SHIFT),
    "KEY_ENTER": ("enter", ()),
    "KEY_ESCAPE": ("escape", ()),
    "KEY_BACKSPACE": ("backspace", ()),
    "KEY_DELETE": ("delete", ()),
    "KEY_TAB": ("tab", ()),
}

CONTROL_CHARS: Dict[str, str] = {
    " ": "space",
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x1b": "escape",
    "\x7f": "backspace",
    "\x08": "backspace",
}


def translate_key(key: Keystroke) -> Optional[Event]:
    """Map a blessed keystroke to an engine event; ``None`` drops it."""

    text = str(key)
    if not text:
        return None
    if text == CTRL_C:
        return Interrupt()
    if key.is_sequence:
        name = key.name or ""
        if name in KEY_NAMES:
            code, modifiers = KEY_NAMES[name]
            return KeyPress(code, modifiers)
        if name.startswith("KEY_"):
            return KeyPress(name[4:].lower())
        return None
    if text in CONTROL_CHARS:
        return KeyPress(CONTROL_CHARS[text])
    if len(text) == 1 and ord(text) < 32:
        return KeyPress(chr(ord(text) + 96), ("ctrl",))
    return KeyPress(text)


class BlessedTerminal(Terminal):
    """Alternate screen, raw input and buffered output over ``blessed``.

    Output primitives append to a frame buffer that :meth:`flush` writes in a
    single call. Viewport changes are noticed while polling and reported as
    :class:`Resize` events.
    """

    def __init__(
        self,
        screen: Optional[BlessedScreen] = None,
        *,
        stream: Optional[IO[str]] = None,
    ) -> None:
        self.screen = screen or BlessedScreen()
        self._stream = stream or self.screen.stream
        self._pending: List[str] = []
        self._raw: Optional[ExitStack] = None
        self._exclusive = False
        self._last_size: Optional[Tuple[int, int]] = None

    def size(self) -> Tuple[int, int]:
        self._last_size = self._measure()
        return self._last_size

    def _measure(self) -> Tuple[int, int]:
        return (self.screen.width, self.screen.height)

    def enter_exclusive_mode(self) -> None:
        if self._exclusive:
            return
        self._write_now(self.screen.enter_fullscreen)
        self._exclusive = True

    def leave_exclusive_mode(self) -> None:
        if not self._exclusive:
            return
        self._exclusive = False
        self._pending.clear()
        self._write_now(self.screen.normal + self.screen.exit_fullscreen)

    def set_raw_input(self, enabled: bool) -> None:
        if enabled and self._raw is None:
            stack = ExitStack()
            stack.enter_context(self.screen.raw())
            self._raw = stack
        elif not enabled and self._raw is not None:
            stack, self._raw = self._raw, None
            stack.close()

    def set_cursor_visible(self, visible: bool) -> None:
        self._write_now(self.screen.normal_cursor if visible else self.screen.hide_cursor)

    def poll_events(self, timeout: float) -> Sequence[Event]:
        events: List[Event] = []
        key = self.screen.inkey(timeout=timeout)
        while key:
            event = translate_key(key)
            if event is not None:
                events.append(event)
            key = self.screen.inkey(timeout=0)

        size = self._measure()
        if self._last_size is not None and size != self._last_size:
            events.append(Resize(*size))
        self._last_size = size
        return events

    def move_write_cursor(self, x: int, y: int) -> None:
        self._pending.append(self.screen.move_xy(x, y))

    def write_text(self, text: str) -> None:
        self._pending.append(text)

    def set_foreground(self, color: Color) -> None:
        self._pending.append(self.screen.color(color.ansi))

    def set_background(self, color: Color) -> None:
        self._pending.append(self.screen.on_color(color.ansi))

    def reset_style(self) -> None:
        self._pending.append(self.screen.normal)

    def clear_screen(self) -> None:
        self._pending.append(self.screen.home + self.screen.clear)

    def flush(self) -> None:
        data = "".join(self._pending)
        self._pending.clear()
        self._stream.write(data)
        self._stream.flush()

    def _write_now(self, sequence: str) -> None:
        self._pending.append(sequence)
        self.flush()


__all__ = ["BlessedTerminal", "translate_key", "KEY_NAMES"]
