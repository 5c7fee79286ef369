"""Built-in key bindings for the painter."""

from __future__ import annotations

from typing import Iterable, Sequence

from paint2d.actions import core as core_actions
from paint2d.actions import motion as motion_actions
from paint2d.actions import paint as paint_actions

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

# (action id, handler attribute, module, description)
_ACTION_TABLE: tuple[tuple[str, str, object, str], ...] = (
    ("cursor.left", "move_left", motion_actions, "Move one cell left"),
    ("cursor.right", "move_right", motion_actions, "Move one cell right"),
    ("cursor.up", "move_up", motion_actions, "Move one cell up"),
    ("cursor.down", "move_down", motion_actions, "Move one cell down"),
    ("cursor.jump_left", "jump_left", motion_actions, "Accelerated move left"),
    ("cursor.jump_right", "jump_right", motion_actions, "Accelerated move right"),
    ("cursor.jump_up", "jump_up", motion_actions, "Accelerated move up"),
    ("cursor.jump_down", "jump_down", motion_actions, "Accelerated move down"),
    ("canvas.paint", "paint_cell", paint_actions, "Paint the cell under the cursor"),
    ("canvas.erase", "erase_cell", paint_actions, "Erase the cell under the cursor"),
    ("canvas.clear", "clear_canvas", paint_actions, "Erase every cell"),
    ("palette.next", "next_color", paint_actions, "Select the next color"),
    ("palette.previous", "previous_color", paint_actions, "Select the previous color"),
    ("palette.select", "select_color", paint_actions, "Select a color by number"),
    ("session.quit", "quit_session", core_actions, "Quit the painter"),
)

# (key token, action id)
_BINDING_TABLE: tuple[tuple[str, str], ...] = (
    ("left", "cursor.left"),
    ("right", "cursor.right"),
    ("up", "cursor.up"),
    ("down", "cursor.down"),
    ("h", "cursor.left"),
    ("l", "cursor.right"),
    ("k", "cursor.up"),
    ("j", "cursor.down"),
    ("shift+left", "cursor.jump_left"),
    ("shift+right", "cursor.jump_right"),
    ("shift+up", "cursor.jump_up"),
    ("shift+down", "cursor.jump_down"),
    ("H", "cursor.jump_left"),
    ("L", "cursor.jump_right"),
    ("K", "cursor.jump_up"),
    ("J", "cursor.jump_down"),
    ("space", "canvas.paint"),
    ("enter", "canvas.paint"),
    ("x", "canvas.erase"),
    ("backspace", "canvas.erase"),
    ("delete", "canvas.erase"),
    ("c", "canvas.clear"),
    ("]", "palette.next"),
    ("[", "palette.previous"),
    *((str(number), "palette.select") for number in range(1, 9)),
    ("q", "session.quit"),
    ("escape", "session.quit"),
)


def default_actions() -> tuple[ActionRef, ...]:
    return tuple(
        ActionRef(id=action_id, handler=getattr(module, attr), description=text)
        for action_id, attr, module, text in _ACTION_TABLE
    )


def default_bindings() -> tuple[Binding, ...]:
    return tuple(
        Binding(
            id=f"default.{token}",
            stroke=KeyStroke.parse(token),
            action_id=action_id,
            source="default",
        )
        for token, action_id in _BINDING_TABLE
    )


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions and bindings.

    ``extra_bindings`` are registered last and always win over a default that
    uses the same key.
    """

    excluded = set(exclude_bindings or ())
    for action in default_actions():
        registry.register_action(action, replace=replace)

    for binding in default_bindings():
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=True)


__all__ = ["load_default_keymaps", "default_actions", "default_bindings"]
