"""Cursor motion actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from paint2d.canvas import Direction
from paint2d.keymaps.models import KeyStroke

if TYPE_CHECKING:  # pragma: no cover
    from paint2d.engine import CanvasEngine


def _move(engine: "CanvasEngine", direction: Direction, accelerated: bool) -> str:
    x, y = engine.move_cursor(direction, accelerated=accelerated)
    return f"{x},{y}"


def move_left(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    del stroke
    return _move(engine, Direction.LEFT, False)


def move_right(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    del stroke
    return _move(engine, Direction.RIGHT, False)


def move_up(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    del stroke
    return _move(engine, Direction.UP, False)


def move_down(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    del stroke
    return _move(engine, Direction.DOWN, False)


def jump_left(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    del stroke
    return _move(engine, Direction.LEFT, True)


def jump_right(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    del stroke
    return _move(engine, Direction.RIGHT, True)


def jump_up(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    del stroke
    return _move(engine, Direction.UP, True)


def jump_down(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    del stroke
    return _move(engine, Direction.DOWN, True)


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "jump_left",
    "jump_right",
    "jump_up",
    "jump_down",
]
