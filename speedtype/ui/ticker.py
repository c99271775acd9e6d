"""QTimer-backed tick scheduler for the typing session."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer

from speedtype.core.timer import TICK_INTERVAL_MS


class QtTickHandle:
    def __init__(self, timer: QTimer) -> None:
        self._timer: Optional[QTimer] = timer

    def cancel(self) -> None:
        """Stop the timer; queued timeouts are not delivered after this returns."""
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None


class QtTickScheduler:
    """Schedules repeating callbacks on the Qt event loop."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._parent = parent

    def schedule(self, callback: Callable[[], None], interval_ms: int = TICK_INTERVAL_MS) -> QtTickHandle:
        timer = QTimer(self._parent)
        timer.setInterval(interval_ms)
        timer.timeout.connect(callback)
        timer.start()
        return QtTickHandle(timer)
