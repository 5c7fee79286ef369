"""Session-level actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from paint2d.keymaps.models import KeyStroke

if TYPE_CHECKING:  # pragma: no cover
    from paint2d.engine import CanvasEngine


def quit_session(engine: "CanvasEngine", stroke: KeyStroke) -> str:
    engine.stop(reason=f"key:{stroke.token}")
    return "quit"


__all__ = ["quit_session"]
