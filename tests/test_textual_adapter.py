from __future__ import annotations

from typing import List

import pytest
from rich.text import Text

from paint2d.adapters.textual import (
    TextualCanvasAdapter,
    TextualSurface,
    TextualUIHooks,
    create_textual_engine,
    textual_key_event,
)
from paint2d.canvas import Color
from paint2d.engine import CanvasEngine, Interrupt, KeyPress

from conftest import RecordingTerminal


def make_adapter(width: int = 30, height: int = 6, **hook_overrides) -> TextualCanvasAdapter:
    frames: List[Text] = []
    hooks = TextualUIHooks(update_canvas=frames.append, **hook_overrides)
    adapter = TextualCanvasAdapter(create_textual_engine(width, height), hooks)
    adapter.frames = frames  # type: ignore[attr-defined]
    return adapter


@pytest.mark.parametrize(
    ("key", "character", "expected"),
    [
        ("left", None, KeyPress("left")),
        ("shift+left", None, KeyPress("left", ("shift",))),
        ("space", " ", KeyPress("space")),
        ("enter", "\r", KeyPress("enter")),
        ("left_square_bracket", "[", KeyPress("[")),
        ("H", "H", KeyPress("H")),
        ("ctrl+c", "\x03", Interrupt()),
        ("", None, None),
    ],
)
def test_textual_key_event(key, character, expected) -> None:
    assert textual_key_event(key, character) == expected


def test_adapter_rejects_non_textual_engine() -> None:
    engine = CanvasEngine(RecordingTerminal())

    with pytest.raises(TypeError):
        TextualCanvasAdapter(engine, TextualUIHooks(update_canvas=lambda frame: None))


def test_start_renders_first_frame() -> None:
    statuses: List[str] = []
    adapter = make_adapter(update_status=statuses.append)

    adapter.start()

    assert len(adapter.frames) == 1
    assert adapter.engine.canvas.extent == (30, 5)
    assert statuses == [" 0,0  30x5  color:red"]


def test_keys_move_and_paint() -> None:
    adapter = make_adapter()
    adapter.start()

    adapter.handle_textual_key("right")
    adapter.handle_textual_key("space", character=" ")

    assert adapter.engine.canvas.get(1, 0) is Color.RED
    assert adapter.surface.cell(1, 0) == ("+", Color.WHITE, Color.RED)
    assert len(adapter.frames) == 3


def test_quit_key_stops_and_notifies() -> None:
    quits: List[bool] = []
    adapter = make_adapter(on_quit=lambda: quits.append(True))
    adapter.start()

    assert adapter.handle_textual_key("q", character="q") is False
    assert adapter.handle_textual_key("right") is False

    assert quits == [True]
    assert adapter.engine.cursor.position == (0, 0)


def test_resize_updates_surface_and_canvas() -> None:
    adapter = make_adapter(width=30, height=6)
    adapter.start()
    adapter.handle_textual_key("shift+right")

    adapter.handle_resize(5, 4)
    adapter.handle_resize(0, 0)

    assert adapter.surface.size() == (5, 4)
    assert adapter.engine.canvas.extent == (5, 3)
    assert adapter.engine.cursor.position == (3, 0)


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter = make_adapter(log=logs.append)
    adapter.start()

    adapter.handle_textual_key("left")

    assert any(line.startswith("key ->") for line in logs)


def test_surface_render_produces_styled_text() -> None:
    surface = TextualSurface(3, 2)
    surface.move_write_cursor(1, 1)
    surface.set_background(Color.GREEN)
    surface.write_text(" ")
    surface.reset_style()
    surface.write_text("xyz")

    text = surface.render()

    assert text.plain == "   \n  x"
    assert surface.lines() == ["   ", "  x"]
    assert surface.cell(1, 1) == (" ", None, Color.GREEN)
