"""Shared fixtures: a scheduler that only ticks when the test says so."""

from __future__ import annotations

from typing import Callable, List

import pytest

from speedtype.core.timer import TICK_INTERVAL_MS


class _ManualHandle:
    def __init__(self, callback: Callable[[], None]) -> None:
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        self.active = False


class ManualTickScheduler:
    """Each ``advance()`` step invokes every still-active callback once."""

    def __init__(self) -> None:
        self._handles: List[_ManualHandle] = []

    def schedule(self, callback: Callable[[], None], interval_ms: int = TICK_INTERVAL_MS) -> _ManualHandle:
        handle = _ManualHandle(callback)
        self._handles.append(handle)
        return handle

    @property
    def active_count(self) -> int:
        return sum(1 for h in self._handles if h.active)

    def advance(self, ticks: int = 1) -> None:
        for _ in range(ticks):
            for handle in list(self._handles):
                if handle.active:
                    handle.callback()
            self._handles = [h for h in self._handles if h.active]


@pytest.fixture()
def scheduler() -> ManualTickScheduler:
    return ManualTickScheduler()
