"""Tests for speedtype.core.timer – countdown and manual scheduling."""

from __future__ import annotations

import pytest

from speedtype.core.timer import SessionTimer, TimerState


@pytest.fixture()
def expired() -> list:
    return []


@pytest.fixture()
def timer(expired: list) -> SessionTimer:
    return SessionTimer(on_expired=lambda: expired.append(True))


# ---------------------------------------------------------------------------
# SessionTimer – start
# ---------------------------------------------------------------------------

class TestStart:
    def test_initially_stopped(self, timer):
        assert timer.state is TimerState.STOPPED

    def test_start_sets_remaining(self, timer):
        timer.start(60)
        assert timer.state is TimerState.TICKING
        assert timer.remaining == 60

    def test_start_while_ticking_is_noop(self, timer):
        timer.start(60)
        timer.tick()
        timer.start(30)
        assert timer.remaining == 59

    @pytest.mark.parametrize("duration", [0, -5])
    def test_non_positive_duration_raises(self, timer, duration):
        with pytest.raises(ValueError):
            timer.start(duration)


# ---------------------------------------------------------------------------
# SessionTimer – tick / expiry
# ---------------------------------------------------------------------------

class TestTick:
    def test_tick_decrements(self, timer):
        timer.start(3)
        timer.tick()
        assert timer.remaining == 2

    def test_expires_exactly_once(self, timer, expired):
        timer.start(2)
        timer.tick()
        assert expired == []
        timer.tick()
        assert expired == [True]
        assert timer.state is TimerState.STOPPED
        assert timer.remaining == 0
        timer.tick()
        timer.tick()
        assert expired == [True]

    def test_tick_while_stopped_is_noop(self, timer):
        timer.tick()
        assert timer.remaining == 0

    def test_no_callback_is_fine(self):
        t = SessionTimer()
        t.start(1)
        t.tick()
        assert t.state is TimerState.STOPPED


# ---------------------------------------------------------------------------
# SessionTimer – stop / reset
# ---------------------------------------------------------------------------

class TestStop:
    def test_stop_keeps_remaining(self, timer, expired):
        timer.start(10)
        timer.tick()
        timer.stop()
        assert timer.state is TimerState.STOPPED
        assert timer.remaining == 9
        assert expired == []

    def test_stop_is_idempotent(self, timer):
        timer.stop()
        timer.stop()
        assert timer.state is TimerState.STOPPED

    def test_ticks_after_stop_ignored(self, timer, expired):
        timer.start(1)
        timer.stop()
        timer.tick()
        assert timer.remaining == 1
        assert expired == []

    def test_reset(self, timer):
        timer.start(5)
        timer.tick()
        timer.reset(60)
        assert timer.state is TimerState.STOPPED
        assert timer.remaining == 60

