"""Running flag shared between the main loop and OS signal handlers."""

from __future__ import annotations

import signal
import threading
from types import FrameType
from typing import Any, Dict, Iterable, Optional

from paint2d.runtime import telemetry


class RunFlag:
    """Thread-safe one-way switch from running to stopped.

    Backed by :class:`threading.Event`, so a signal handler or another thread
    can stop the session while the main loop polls.
    """

    __slots__ = ("_stopped", "_reason")

    def __init__(self) -> None:
        self._stopped = threading.Event()
        self._reason: Optional[str] = None

    @property
    def running(self) -> bool:
        return not self._stopped.is_set()

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def stop(self, reason: str = "stop") -> bool:
        """Stop the flag; returns ``False`` when it was already stopped."""

        if self._stopped.is_set():
            return False
        self._reason = reason
        self._stopped.set()
        return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._stopped.wait(timeout)


def _default_signals() -> tuple[int, ...]:
    names = ("SIGINT", "SIGTERM", "SIGHUP")
    return tuple(getattr(signal, name) for name in names if hasattr(signal, name))


class InterruptListener:
    """Installs signal handlers that stop a :class:`RunFlag`.

    Use as a context manager; previous handlers are restored on exit. Outside
    the main thread ``signal.signal`` is unavailable and the listener does
    nothing.
    """

    def __init__(self, flag: RunFlag, signals: Optional[Iterable[int]] = None) -> None:
        self.flag = flag
        self.signals = tuple(signals) if signals is not None else _default_signals()
        self._previous: Dict[int, Any] = {}

    def handle(self, signum: int, frame: Optional[FrameType] = None) -> None:
        del frame
        name = signal.Signals(signum).name
        if self.flag.stop(reason=f"signal:{name}"):
            telemetry.record_event("session.interrupt", data={"signal": name})

    def install(self) -> "InterruptListener":
        if threading.current_thread() is not threading.main_thread():
            return self
        for signum in self.signals:
            self._previous[signum] = signal.getsignal(signum)
            signal.signal(signum, self.handle)
        return self

    def uninstall(self) -> None:
        while self._previous:
            signum, handler = self._previous.popitem()
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)

    def __enter__(self) -> "InterruptListener":
        return self.install()

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.uninstall()
        return False


__all__ = ["RunFlag", "InterruptListener"]
