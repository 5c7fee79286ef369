from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import pytest

from paint2d.canvas import Color
from paint2d.config import PainterConfig
from paint2d.engine import CanvasEngine, Event, Interrupt
from paint2d.terminal import Terminal


class RecordingTerminal(Terminal):
    """Terminal double that records every call and replays queued events.

    ``fail_on`` names primitives that raise ``OSError``. Once the queued event
    batches run out, ``poll_events`` returns an ``Interrupt`` so ``run()``
    always terminates.
    """

    def __init__(
        self,
        width: int = 20,
        height: int = 10,
        *,
        events: Optional[Iterable[Sequence[Event]]] = None,
        fail_on: Iterable[str] = (),
    ) -> None:
        self.width = width
        self.height = height
        self.queued: List[Sequence[Event]] = list(events or [])
        self.fail_on = set(fail_on)
        self.calls: List[Tuple[object, ...]] = []
        self.frames: List[Tuple[Tuple[object, ...], ...]] = []
        self._frame: List[Tuple[object, ...]] = []
        self.exclusive = False
        self.raw = False
        self.cursor_visible = True

    def _record(self, name: str, *args: object) -> None:
        if name in self.fail_on:
            raise OSError(f"{name} failed")
        self.calls.append((name, *args))

    def _draw(self, name: str, *args: object) -> None:
        self._record(name, *args)
        self._frame.append((name, *args))

    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def enter_exclusive_mode(self) -> None:
        self._record("enter_exclusive_mode")
        self.exclusive = True

    def leave_exclusive_mode(self) -> None:
        self._record("leave_exclusive_mode")
        self.exclusive = False

    def set_raw_input(self, enabled: bool) -> None:
        self._record("set_raw_input", enabled)
        self.raw = enabled

    def set_cursor_visible(self, visible: bool) -> None:
        self._record("set_cursor_visible", visible)
        self.cursor_visible = visible

    def poll_events(self, timeout: float) -> Sequence[Event]:
        self._record("poll_events", timeout)
        if self.queued:
            return self.queued.pop(0)
        return [Interrupt()]

    def move_write_cursor(self, x: int, y: int) -> None:
        self._draw("move", x, y)

    def write_text(self, text: str) -> None:
        self._draw("text", text)

    def set_foreground(self, color: Color) -> None:
        self._draw("fg", color)

    def set_background(self, color: Color) -> None:
        self._draw("bg", color)

    def reset_style(self) -> None:
        self._draw("reset")

    def clear_screen(self) -> None:
        self._draw("clear")

    def flush(self) -> None:
        self._record("flush")
        self.frames.append(tuple(self._frame))
        self._frame = []


@pytest.fixture
def terminal() -> RecordingTerminal:
    return RecordingTerminal()


@pytest.fixture
def flat_config() -> PainterConfig:
    """Config without a status row, so the canvas matches the viewport."""

    return PainterConfig(reserved_rows=0)


def make_engine(
    terminal: Terminal,
    *,
    config: Optional[PainterConfig] = None,
    extent: Optional[Tuple[int, int]] = (20, 10),
) -> CanvasEngine:
    engine = CanvasEngine(terminal, config=config)
    engine.initialize(extent)
    return engine
