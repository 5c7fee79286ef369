"""Painter configuration and its ``PAINT2D_*`` environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Callable, Mapping, Optional

from paint2d.canvas import Color

ENV_PREFIX = "PAINT2D_"


@dataclass(frozen=True)
class PainterConfig:
    """Step sizes, layout and loop timing.

    Terminal cells are roughly twice as tall as they are wide, so the
    vertical steps default to smaller values than the horizontal ones.
    """

    horizontal_step: int = 1
    horizontal_fast_step: int = 8
    vertical_step: int = 1
    vertical_fast_step: int = 4
    reserved_rows: int = 1
    poll_timeout: float = 0.03
    cursor_glyph: str = "+"
    initial_color: str = Color.RED.value

    def validate(self) -> "PainterConfig":
        for name in (
            "horizontal_step",
            "horizontal_fast_step",
            "vertical_step",
            "vertical_fast_step",
        ):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive")
        if self.reserved_rows < 0:
            raise ValueError("reserved_rows cannot be negative")
        if self.poll_timeout <= 0:
            raise ValueError("poll_timeout must be positive")
        if len(self.cursor_glyph) != 1:
            raise ValueError("cursor_glyph must be a single character")
        Color.parse(self.initial_color)
        return self

    @property
    def color(self) -> Color:
        return Color.parse(self.initial_color)

    def step_for(self, horizontal: bool, accelerated: bool) -> int:
        if horizontal:
            return self.horizontal_fast_step if accelerated else self.horizontal_step
        return self.vertical_fast_step if accelerated else self.vertical_step

    def with_overrides(self, **changes: object) -> "PainterConfig":
        known = {f.name for f in fields(self)}
        picked = {k: v for k, v in changes.items() if k in known and v is not None}
        return replace(self, **picked).validate()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PainterConfig":
        """Read ``PAINT2D_*`` overrides; a bad value falls back for its field only."""

        env = os.environ if environ is None else environ
        base = cls()
        picked: dict[str, object] = {}

        def read(name: str, field_name: str, parse: Callable[[str], object]) -> None:
            raw = env.get(f"{ENV_PREFIX}{name}")
            if raw is None or not raw.strip():
                return
            try:
                value = parse(raw.strip())
                replace(base, **{field_name: value}).validate()
            except ValueError:
                return
            picked[field_name] = value

        read("H_STEP", "horizontal_step", int)
        read("H_FAST_STEP", "horizontal_fast_step", int)
        read("V_STEP", "vertical_step", int)
        read("V_FAST_STEP", "vertical_fast_step", int)
        read("RESERVED_ROWS", "reserved_rows", int)
        read("POLL_MS", "poll_timeout", lambda raw: int(raw) / 1000.0)
        read("CURSOR_GLYPH", "cursor_glyph", str)
        read("COLOR", "initial_color", lambda raw: Color.parse(raw).value)
        return replace(base, **picked)


__all__ = ["ENV_PREFIX", "PainterConfig"]
