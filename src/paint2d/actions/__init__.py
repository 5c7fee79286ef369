"""Painter verbs bound to keys by the default keymap."""

from .core import quit_session
from .motion import (
    jump_down,
    jump_left,
    jump_right,
    jump_up,
    move_down,
    move_left,
    move_right,
    move_up,
)
from .paint import (
    clear_canvas,
    erase_cell,
    next_color,
    paint_cell,
    previous_color,
    select_color,
)

__all__ = [
    "quit_session",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "jump_left",
    "jump_right",
    "jump_up",
    "jump_down",
    "paint_cell",
    "erase_cell",
    "clear_canvas",
    "next_color",
    "previous_color",
    "select_color",
]
