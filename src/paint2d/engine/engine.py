"""Canvas engine: input dispatch, resize handling and full-frame redraw."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, List, Optional, Tuple

from paint2d.canvas import Canvas, Color, Cursor, Direction, Palette
from paint2d.config import PainterConfig
from paint2d.keymaps import KeymapRegistry, load_default_keymaps
from paint2d.runtime import telemetry

from .events import Event, Interrupt, KeyPress, Resize
from .interrupt import InterruptListener, RunFlag

if TYPE_CHECKING:  # pragma: no cover
    from paint2d.terminal.base import Terminal

LOGGER_NAME = "paint2d.engine"
INTERRUPT_TOKENS = frozenset({"ctrl+c"})


class CanvasEngine:
    """Owns the canvas, the cursor and the poll/process/redraw loop.

    Only :meth:`process_input` mutates the canvas and cursor. The running
    flag is the one piece of state other threads and signal handlers may
    touch, through :meth:`stop`.
    """

    def __init__(
        self,
        terminal: "Terminal",
        *,
        config: Optional[PainterConfig] = None,
        keymap_registry: Optional[KeymapRegistry] = None,
        palette: Optional[Palette] = None,
    ) -> None:
        self.terminal = terminal
        self.config = (config or PainterConfig()).validate()
        if keymap_registry is None:
            keymap_registry = KeymapRegistry(logger_name=LOGGER_NAME)
            load_default_keymaps(keymap_registry)
        self.keymap_registry = keymap_registry
        self.palette = palette or Palette(current=self.config.color)
        self.last_message: str = ""
        self.frames = 0
        self._flag = RunFlag()
        self._canvas: Optional[Canvas] = None
        self._cursor: Optional[Cursor] = None
        self._viewport: Optional[Tuple[int, int]] = None
        self._releases: List[Tuple[str, Callable[[], None]]] = []

    # -- state -----------------------------------------------------------

    @property
    def initialized(self) -> bool:
        return self._canvas is not None

    @property
    def canvas(self) -> Canvas:
        if self._canvas is None:
            raise RuntimeError("CanvasEngine.initialize() has not been called")
        return self._canvas

    @property
    def cursor(self) -> Cursor:
        if self._cursor is None:
            raise RuntimeError("CanvasEngine.initialize() has not been called")
        return self._cursor

    @property
    def viewport(self) -> Optional[Tuple[int, int]]:
        return self._viewport

    @property
    def running(self) -> bool:
        return self._flag.running

    @property
    def stop_reason(self) -> Optional[str]:
        return self._flag.reason

    def stop(self, reason: str = "stop") -> None:
        """Move to the stopped state; safe from any thread, idempotent."""

        if self._flag.stop(reason):
            telemetry.record_event(
                "session.stop", data={"reason": reason}, logger_name=LOGGER_NAME
            )

    # -- lifecycle -------------------------------------------------------

    def initialize(self, viewport_extent: Optional[Tuple[int, int]] = None) -> None:
        """Allocate an empty canvas and take over the terminal."""

        if self._releases:
            self.shutdown()
        width, height = viewport_extent or self.terminal.size()
        self._viewport = (max(1, width), max(1, height))
        canvas_width, canvas_height = self._canvas_extent(self._viewport)
        self._canvas = Canvas(canvas_width, canvas_height)
        self._cursor = Cursor(canvas_width, canvas_height)
        self._flag = RunFlag()
        self.frames = 0
        self.last_message = ""

        try:
            self._acquire(
                "exclusive_mode",
                self.terminal.enter_exclusive_mode,
                self.terminal.leave_exclusive_mode,
            )
            self._acquire(
                "raw_input",
                lambda: self.terminal.set_raw_input(True),
                lambda: self.terminal.set_raw_input(False),
            )
            self._acquire(
                "cursor_hidden",
                lambda: self.terminal.set_cursor_visible(False),
                lambda: self.terminal.set_cursor_visible(True),
            )
        except BaseException:
            self.shutdown()
            raise

        telemetry.record_event(
            "session.start",
            data={"viewport": self._viewport, "canvas": self._canvas.extent},
            logger_name=LOGGER_NAME,
        )

    def shutdown(self) -> None:
        """Release everything :meth:`initialize` acquired, newest first.

        Every release is attempted; the first failure is re-raised once all
        of them have run.
        """

        failure: Optional[BaseException] = None
        while self._releases:
            name, release = self._releases.pop()
            try:
                release()
            except Exception as exc:
                telemetry.record_event(
                    "session.release_failed",
                    level="error",
                    data={"resource": name, "error": exc},
                    logger_name=LOGGER_NAME,
                )
                if failure is None:
                    failure = exc
        if failure is not None:
            raise failure

    def run(self) -> None:
        """Poll, process and redraw until a quit key or interrupt arrives."""

        if not self.initialized:
            self.initialize()
        if not self.running:
            self.shutdown()
            return
        try:
            with InterruptListener(self._flag):
                self.redraw()
                while self.running:
                    events = self.terminal.poll_events(self.config.poll_timeout)
                    if events:
                        self.process_input(events)
                    if not self.running:
                        break
                    self.redraw()
        except Exception as exc:
            telemetry.record_event(
                "session.error",
                level="error",
                data={"error": exc, "frames": self.frames},
                logger_name=LOGGER_NAME,
            )
            raise
        finally:
            self.shutdown()

    # -- input -----------------------------------------------------------

    def process_input(self, events: Iterable[Event]) -> None:
        """Apply a batch of events in arrival order; no-op once stopped."""

        if not self.running:
            return
        batch = list(events)
        with telemetry.span(
            "engine::process_input",
            logger_name=LOGGER_NAME,
            metadata={"events": len(batch)},
        ):
            for event in batch:
                if not self.running:
                    break
                self._dispatch(event)

    def _dispatch(self, event: Event) -> None:
        if isinstance(event, Interrupt):
            self.stop(reason="interrupt")
        elif isinstance(event, Resize):
            self.resize(event.width, event.height)
        elif isinstance(event, KeyPress):
            self._handle_key(event)
        else:
            self._ignore(event)

    def _handle_key(self, event: KeyPress) -> None:
        try:
            stroke = event.stroke
        except (TypeError, ValueError):
            self._ignore(event)
            return
        if stroke.token in INTERRUPT_TOKENS:
            self.stop(reason="interrupt")
            return
        resolved = self.keymap_registry.lookup(stroke.token)
        if resolved is None:
            self._ignore(event)
            return
        message = resolved.action(self, stroke)
        if isinstance(message, str):
            self.last_message = message

    def _ignore(self, event: object) -> None:
        telemetry.record_event(
            "input.ignored",
            level="debug",
            data={"event": event},
            logger_name=LOGGER_NAME,
        )

    # -- mutations used by actions --------------------------------------

    def move_cursor(
        self, direction: Direction, *, accelerated: bool = False
    ) -> Tuple[int, int]:
        direction = Direction(direction)
        step = self.config.step_for(direction.horizontal, accelerated)
        return self.cursor.move(direction, step)

    def paint_at_cursor(self, color: Optional[Color] = None) -> Color:
        chosen = Color(color) if color is not None else self.palette.current
        self.canvas.paint(self.cursor.row, self.cursor.col, chosen)
        return chosen

    def erase_at_cursor(self) -> None:
        self.canvas.erase(self.cursor.row, self.cursor.col)

    def resize(self, width: int, height: int) -> None:
        """Fit the canvas and cursor to a new viewport.

        Cells that stay in bounds keep their color, the rest are dropped, and
        a cursor left outside the new bounds wraps back in.
        """

        if width < 1 or height < 1:
            self._ignore(Resize(width, height))
            return
        with telemetry.span(
            "engine::resize",
            logger_name=LOGGER_NAME,
            metadata={"width": width, "height": height},
        ):
            self._viewport = (width, height)
            canvas_width, canvas_height = self._canvas_extent(self._viewport)
            self.canvas.resize(canvas_width, canvas_height)
            self.cursor.resize(canvas_width, canvas_height)
            self.cursor.normalize()

    # -- output ----------------------------------------------------------

    def redraw(self) -> None:
        """Repaint the whole frame: cells, status row, then the cursor."""

        canvas = self.canvas
        cursor = self.cursor
        term = self.terminal

        term.reset_style()
        term.clear_screen()
        for y, row in enumerate(canvas.rows()):
            term.move_write_cursor(0, y)
            for cell in row:
                if cell is None:
                    term.write_text(" ")
                else:
                    term.set_background(cell)
                    term.write_text(" ")
                    term.reset_style()

        self._draw_status()

        under = canvas.get(cursor.row, cursor.col)
        term.move_write_cursor(cursor.row, cursor.col)
        if under is None:
            term.set_foreground(self.palette.current)
        else:
            term.set_background(under)
            term.set_foreground(under.contrast)
        term.write_text(self.config.cursor_glyph)
        term.reset_style()
        term.flush()
        self.frames += 1

    def status_text(self) -> str:
        canvas = self.canvas
        parts = [
            f"{self.cursor.row},{self.cursor.col}",
            f"{canvas.width}x{canvas.height}",
            f"color:{self.palette.current.value}",
        ]
        if self.last_message:
            parts.append(self.last_message)
        return " " + "  ".join(parts)

    def _draw_status(self) -> None:
        if self._viewport is None or self.config.reserved_rows < 1:
            return
        width, height = self._viewport
        y = self.canvas.height
        if y >= height:
            return
        self.terminal.move_write_cursor(0, y)
        self.terminal.write_text(self.status_text()[:width].ljust(width))

    # -- helpers ---------------------------------------------------------

    def _canvas_extent(self, viewport: Tuple[int, int]) -> Tuple[int, int]:
        width, height = viewport
        return (max(1, width), max(1, height - self.config.reserved_rows))

    def _acquire(
        self, name: str, acquire: Callable[[], None], release: Callable[[], None]
    ) -> None:
        acquire()
        self._releases.append((name, release))


__all__ = ["CanvasEngine"]
