"""Countdown timer and the tick-scheduling seam used by the typing session.

``SessionTimer`` only holds the countdown integer. Something outside it has to
call ``tick()`` once per elapsed second; that something is a ``TickScheduler``
(a ``QTimer`` in the desktop app).
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class TimerState(enum.Enum):
    STOPPED = "stopped"
    TICKING = "ticking"


class SessionTimer:
    """Integer countdown with a one-shot ``on_expired`` callback."""

    def __init__(self, on_expired: Optional[Callable[[], None]] = None) -> None:
        self._on_expired = on_expired
        self._state = TimerState.STOPPED
        self._remaining = 0

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def remaining(self) -> int:
        return self._remaining

    def start(self, duration_seconds: int) -> None:
        """Begin counting down from *duration_seconds*. Ignored while ticking."""
        if duration_seconds <= 0:
            raise ValueError(f"duration must be positive, got {duration_seconds}")
        if self._state is TimerState.TICKING:
            return
        self._remaining = int(duration_seconds)
        self._state = TimerState.TICKING

    def tick(self) -> None:
        if self._state is not TimerState.TICKING:
            return
        self._remaining = max(0, self._remaining - 1)
        if self._remaining == 0:
            self._state = TimerState.STOPPED
            logger.debug("Timer expired")
            if self._on_expired is not None:
                self._on_expired()

    def stop(self) -> None:
        """Stop counting at the current value without signalling expiry."""
        self._state = TimerState.STOPPED

    def reset(self, duration_seconds: int) -> None:
        self._state = TimerState.STOPPED
        self._remaining = int(duration_seconds)


class TickHandle(Protocol):
    def cancel(self) -> None: ...


class TickScheduler(Protocol):
    def schedule(self, callback: Callable[[], None], interval_ms: int = TICK_INTERVAL_MS) -> TickHandle: ...

