"""Adapter that feeds Textual key and resize events into a CanvasEngine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from rich.text import Text

from paint2d.config import PainterConfig
from paint2d.engine import CanvasEngine, Event, Interrupt, KeyPress, Resize
from paint2d.runtime import telemetry

from .surface import TextualSurface

LOGGER_NAME = "paint2d.textual"

# Textual key names that stay as-is even when a character is attached.
NAMED_KEYS = frozenset(
    {"space", "enter", "escape", "backspace", "delete", "tab", "left", "right", "up", "down"}
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_canvas: Callable[[Text], None]
    update_status: Callable[[str], None] = _noop
    on_quit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


def textual_key_event(key: str, character: Optional[str] = None) -> Optional[Event]:
    """Translate a Textual ``Key`` (name plus character) into an engine event."""

    if not key:
        return None
    if key == "ctrl+c":
        return Interrupt()
    if "+" in key.strip("+"):
        *modifiers, code = key.split("+")
        return KeyPress(code, tuple(modifiers))
    if (
        key not in NAMED_KEYS
        and character
        and len(character) == 1
        and character.isprintable()
    ):
        return KeyPress(character)
    return KeyPress(key)


def create_textual_engine(
    width: int, height: int, *, config: Optional[PainterConfig] = None
) -> CanvasEngine:
    return CanvasEngine(TextualSurface(width, height), config=config)


class TextualCanvasAdapter:
    """Bridges Textual events to the engine and frames back to widgets."""

    def __init__(self, engine: CanvasEngine, hooks: TextualUIHooks) -> None:
        if not isinstance(engine.terminal, TextualSurface):
            raise TypeError("TextualCanvasAdapter needs an engine drawing on a TextualSurface")
        self.engine = engine
        self.surface: TextualSurface = engine.terminal
        self.hooks = hooks
        self.surface.on_frame = hooks.update_canvas

    def start(self) -> None:
        if not self.engine.initialized:
            self.engine.initialize(self.surface.size())
        self._refresh()

    def handle_textual_key(self, key: str, *, character: Optional[str] = None) -> bool:
        """Dispatch one key; returns ``False`` once the session has stopped."""

        event = textual_key_event(key, character)
        self._log("key ->", key=key, character=character, event=event)
        if event is not None:
            self._dispatch(event)
        return self.engine.running

    def handle_resize(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            return
        self.surface.resize(width, height)
        self._dispatch(Resize(width, height))

    def stop(self) -> None:
        self.engine.stop(reason="host")
        self.engine.shutdown()

    def _dispatch(self, event: Event) -> None:
        if not self.engine.running:
            return
        self.engine.process_input([event])
        if self.engine.running:
            self._refresh()
            return
        telemetry.record_event(
            "textual.quit",
            data={"reason": self.engine.stop_reason},
            logger_name=LOGGER_NAME,
        )
        self.engine.shutdown()
        self.hooks.on_quit()

    def _refresh(self) -> None:
        self.engine.redraw()
        self.hooks.update_status(self.engine.status_text())

    def _log(self, prefix: str, **fields: object) -> None:
        parts = [prefix]
        parts.extend(f"{key}={value!r}" for key, value in fields.items() if value is not None)
        self.hooks.log(" ".join(parts))


__all__ = [
    "TextualCanvasAdapter",
    "TextualUIHooks",
    "create_textual_engine",
    "textual_key_event",
]
