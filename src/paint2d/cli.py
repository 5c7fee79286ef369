"""Command-line entry point: ``paint2d`` / ``python -m paint2d``."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from paint2d.canvas import Color
from paint2d.config import PainterConfig
from paint2d.runtime import telemetry

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="paint2d",
        description="Paint colored cells on a terminal-sized canvas.",
    )
    parser.add_argument(
        "--backend",
        choices=("terminal", "textual"),
        default=os.environ.get("PAINT2D_BACKEND", "terminal"),
        help="Drive the terminal directly or host the canvas in Textual",
    )
    parser.add_argument("--step", type=int, dest="horizontal_step", help="Horizontal step")
    parser.add_argument(
        "--fast-step", type=int, dest="horizontal_fast_step", help="Accelerated horizontal step"
    )
    parser.add_argument("--vstep", type=int, dest="vertical_step", help="Vertical step")
    parser.add_argument(
        "--fast-vstep", type=int, dest="vertical_fast_step", help="Accelerated vertical step"
    )
    parser.add_argument("--poll-ms", type=int, help="Input poll timeout in milliseconds")
    parser.add_argument(
        "--color",
        dest="initial_color",
        choices=[color.value for color in Color],
        help="Color selected at startup",
    )
    parser.add_argument(
        "--no-status",
        action="store_true",
        help="Use every terminal row for the canvas",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        help="telelog preset (default: driven by PAINT2D_LOG_* variables)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> PainterConfig:
    overrides = {
        "horizontal_step": args.horizontal_step,
        "horizontal_fast_step": args.horizontal_fast_step,
        "vertical_step": args.vertical_step,
        "vertical_fast_step": args.vertical_fast_step,
        "initial_color": args.initial_color,
        "poll_timeout": args.poll_ms / 1000.0 if args.poll_ms is not None else None,
        "reserved_rows": 0 if args.no_status else None,
    }
    return PainterConfig.from_env().with_overrides(**overrides)


def run_terminal(config: PainterConfig) -> Optional[str]:
    from paint2d.engine import CanvasEngine
    from paint2d.terminal import BlessedTerminal

    engine = CanvasEngine(BlessedTerminal(), config=config)
    engine.run()
    return engine.stop_reason


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    try:
        config = build_config(args)
    except ValueError as exc:
        print(f"paint2d: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        if args.backend == "textual":
            from paint2d.adapters.textual.app import run_textual

            run_textual(config)
            return EXIT_OK
        reason = run_terminal(config)
    except OSError as exc:
        print(f"paint2d: terminal error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if reason and (reason == "interrupt" or reason.startswith("signal:")):
        return EXIT_INTERRUPTED
    return EXIT_OK


__all__ = ["main", "build_config"]
