"""Canvas and palette actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from paint2d.keymaps.models import KeyStroke

if TYPE_CHECKING:  # pragma: no cover
    from paint2d.engine import CanvasEngine


def paint_cell(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    del stroke
    color = engine.paint_at_cursor()
    return f"paint {color.value}"


def erase_cell(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    del stroke
    engine.erase_at_cursor()
    return "erase"


def clear_canvas(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    del stroke
    engine.canvas.clear()
    return "clear"


def next_color(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    del stroke
    return f"color {engine.palette.next().value}"


def previous_color(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    del stroke
    return f"color {engine.palette.previous().value}"


def select_color(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    """Number keys pick a palette slot directly."""

    if stroke.key.isdigit():
        engine.palette.select(int(stroke.key))
    return f"color {engine.palette.current.value}"


__all__ = [
    "paint_cell",
    "erase_cell",
    "clear_canvas",
    "next_color",
    "previous_color",
    "select_color",
]
