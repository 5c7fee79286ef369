"""Input events delivered by a terminal backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from paint2d.keymaps.models import KeyStroke


@dataclass(frozen=True, slots=True)
class KeyPress:
    """A key press with its held modifiers (``"shift"``, ``"ctrl"``, ...)."""

    code: str
    modifiers: Tuple[str, ...] = ()

    @property
    def stroke(self) -> KeyStroke:
        return KeyStroke(self.code, self.modifiers)

    @property
    def token(self) -> str:
        return self.stroke.token


@dataclass(frozen=True, slots=True)
class Resize:
    """The viewport changed to ``width x height`` cells."""

    width: int
    height: int


@dataclass(frozen=True, slots=True)
class Interrupt:
    """Ctrl+C or an OS signal asked the session to stop."""


Event = Union[KeyPress, Resize, Interrupt]

__all__ = ["KeyPress", "Resize", "Interrupt", "Event"]
