from __future__ import annotations

import io
from contextlib import contextmanager
from typing import Iterator, List

import pytest
from blessed.keyboard import Keystroke

from paint2d.canvas import Color
from paint2d.engine import Interrupt, KeyPress, Resize
from paint2d.terminal import BlessedTerminal, translate_key


class FakeScreen:
    """Just enough of ``blessed.Terminal`` for the backend to drive."""

    enter_fullscreen = "<fs>"
    exit_fullscreen = "</fs>"
    normal = "<n>"
    hide_cursor = "<hide>"
    normal_cursor = "<show>"
    home = "<home>"
    clear = "<clear>"

    def __init__(self, width: int = 20, height: int = 10) -> None:
        self.width = width
        self.height = height
        self.stream = io.StringIO()
        self.keys: List[Keystroke] = []
        self.raw_depth = 0
        self.timeouts: List[float] = []

    def move_xy(self, x: int, y: int) -> str:
        return f"<{x},{y}>"

    def color(self, index: int) -> str:
        return f"<fg{index}>"

    def on_color(self, index: int) -> str:
        return f"<bg{index}>"

    @contextmanager
    def raw(self) -> Iterator[None]:
        self.raw_depth += 1
        try:
            yield
        finally:
            self.raw_depth -= 1

    def inkey(self, timeout: float) -> Keystroke:
        self.timeouts.append(timeout)
        if self.keys:
            return self.keys.pop(0)
        return Keystroke("")


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        (Keystroke("a"), KeyPress("a")),
        (Keystroke("L"), KeyPress("L")),
        (Keystroke(" "), KeyPress("space")),
        (Keystroke("\r"), KeyPress("enter")),
        (Keystroke("\x7f"), KeyPress("backspace")),
        (Keystroke("\x03"), Interrupt()),
        (Keystroke("\x01"), KeyPress("a", ("ctrl",))),
        (Keystroke("\x1b[D", code=260, name="KEY_LEFT"), KeyPress("left")),
        (Keystroke("\x1b[1;2C", code=402, name="KEY_SRIGHT"), KeyPress("right", ("shift",))),
        (Keystroke("\x1b[1;2A", code=337, name="KEY_SR"), KeyPress("up", ("shift",))),
        (Keystroke("\x1b", code=361, name="KEY_ESCAPE"), KeyPress("escape")),
        (Keystroke("\x1bOP", code=265, name="KEY_F1"), KeyPress("f1")),
    ],
)
def test_translate_key(key: Keystroke, expected) -> None:
    assert translate_key(key) == expected


def test_translate_key_drops_empty_and_unnamed() -> None:
    assert translate_key(Keystroke("")) is None
    assert translate_key(Keystroke("\x1b[99~", code=1)) is None


def test_output_is_buffered_until_flush() -> None:
    screen = FakeScreen()
    terminal = BlessedTerminal(screen)

    terminal.clear_screen()
    terminal.move_write_cursor(3, 1)
    terminal.set_background(Color.BLUE)
    terminal.set_foreground(Color.WHITE)
    terminal.write_text("+")
    terminal.reset_style()
    assert screen.stream.getvalue() == ""

    terminal.flush()

    assert screen.stream.getvalue() == "<home><clear><3,1><bg4><fg7>+<n>"


def test_modes_are_written_immediately_and_released_once() -> None:
    screen = FakeScreen()
    terminal = BlessedTerminal(screen)

    terminal.enter_exclusive_mode()
    terminal.enter_exclusive_mode()
    terminal.set_raw_input(True)
    terminal.set_raw_input(True)
    terminal.set_cursor_visible(False)
    assert screen.raw_depth == 1

    terminal.set_cursor_visible(True)
    terminal.set_raw_input(False)
    terminal.leave_exclusive_mode()
    terminal.leave_exclusive_mode()

    assert screen.raw_depth == 0
    assert screen.stream.getvalue() == "<fs><hide><show><n></fs>"


def test_poll_drains_all_pending_keys() -> None:
    screen = FakeScreen()
    screen.keys = [Keystroke("l"), Keystroke(" "), Keystroke("q")]
    terminal = BlessedTerminal(screen)
    terminal.size()

    events = terminal.poll_events(0.03)

    assert events == [KeyPress("l"), KeyPress("space"), KeyPress("q")]
    assert screen.timeouts[0] == 0.03
    assert all(timeout == 0 for timeout in screen.timeouts[1:])


def test_poll_reports_viewport_changes() -> None:
    screen = FakeScreen(20, 10)
    terminal = BlessedTerminal(screen)
    assert terminal.size() == (20, 10)

    assert terminal.poll_events(0) == []

    screen.width, screen.height = 12, 6
    assert terminal.poll_events(0) == [Resize(12, 6)]
    assert terminal.poll_events(0) == []


def test_flush_propagates_stream_errors() -> None:
    class BrokenStream(io.StringIO):
        def write(self, data: str) -> int:
            raise BrokenPipeError("gone")

    terminal = BlessedTerminal(FakeScreen(), stream=BrokenStream())
    terminal.write_text("x")

    with pytest.raises(OSError):
        terminal.flush()
