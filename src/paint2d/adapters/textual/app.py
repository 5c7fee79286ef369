"""Executable Textual app that hosts the painter."""

from __future__ import annotations

from typing import Optional

try:  # pragma: no cover - imported only when the Textual host is used
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use paint2d.adapters.textual.app"
    ) from exc

from rich.text import Text

from paint2d.config import PainterConfig

from .controller import TextualCanvasAdapter, TextualUIHooks, create_textual_engine


class PaintApp(App[None]):
    """Full-screen Textual host drawing the canvas into a single widget."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#canvas-view {
		width: 1fr;
		height: 1fr;
	}
	"""

    def __init__(self, *, config: Optional[PainterConfig] = None) -> None:
        super().__init__()
        self.config = config or PainterConfig()
        self.adapter: TextualCanvasAdapter | None = None
        self._canvas_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._canvas_widget = Static("", id="canvas-view")
        yield self._canvas_widget

    def on_mount(self) -> None:
        width, height = self.size.width, self.size.height
        engine = create_textual_engine(width, height, config=self.config)
        hooks = TextualUIHooks(
            update_canvas=self._update_canvas,
            on_quit=self.exit,
        )
        self.adapter = TextualCanvasAdapter(engine, hooks)
        self.adapter.start()

    def on_unmount(self) -> None:
        if self.adapter and self.adapter.engine.running:
            self.adapter.stop()

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.handle_resize(event.size.width, event.size.height)

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_key(event.key, character=event.character)
        event.stop()

    def _update_canvas(self, frame: Text) -> None:
        if self._canvas_widget:
            self._canvas_widget.update(frame)


def run_textual(config: Optional[PainterConfig] = None) -> None:
    PaintApp(config=config).run()


__all__ = ["PaintApp", "run_textual"]
