from __future__ import annotations

import enum
import functools
import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from speedtype.core.config import DEFAULT_DURATION_SECONDS, DEFAULT_WORD_COUNT
from speedtype.core.scoring import score_word
from speedtype.core.timer import TICK_INTERVAL_MS, SessionTimer, TickHandle, TickScheduler
from speedtype.core.words import RandomSource, generate_words

logger = logging.getLogger(__name__)

ENTER_KEY = "Enter"
WORD_SEPARATOR = " "


class SessionState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass(frozen=True)
class SessionResults:
    """Final numbers for one finished session."""

    wpm: int
    accuracy: int
    typed_word_count: int
    error_count: int
    total_chars_typed: int
    elapsed_seconds: int


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class TypingSession:
    """Timed word-typing session: idle -> running -> finished.

    The session starts on the first non-empty input. A word is submitted when
    the input ends with a space; it is scored against the current word and
    the cursor advances. The session finishes either when the countdown
    expires or when every word has been submitted, whichever comes first,
    and the results are computed exactly once at that point.

    Scoring follows a simple word-based methodology:
      * **WPM** – submitted words / elapsed minutes.
      * **Accuracy** – (characters typed − errors) / characters typed, in
        percent, clamped to 0–100.
    """

    def __init__(
        self,
        dictionary: Sequence[str],
        scheduler: TickScheduler,
        *,
        duration_seconds: int = DEFAULT_DURATION_SECONDS,
        word_count: int = DEFAULT_WORD_COUNT,
        rng: Optional[RandomSource] = None,
    ) -> None:
        if duration_seconds <= 0:
            raise ValueError(f"duration must be positive, got {duration_seconds}")
        if word_count <= 0:
            raise ValueError(f"word count must be positive, got {word_count}")
        if not dictionary:
            raise ValueError("dictionary must not be empty")
        self._dictionary = tuple(dictionary)
        self._scheduler = scheduler
        self._duration = int(duration_seconds)
        self._word_count = int(word_count)
        self._rng = rng
        self._timer = SessionTimer(on_expired=self.on_timer_expired)
        self._tick_handle: Optional[TickHandle] = None
        self._generation = 0
        self._listeners: List[Callable[[], None]] = []

        self._words: Tuple[str, ...] = ()
        self._index = 0
        self._state = SessionState.IDLE
        self._input_buffer = ""
        self._typed_word_count = 0
        self._error_count = 0
        self._total_chars_typed = 0
        self._results: Optional[SessionResults] = None
        self._timer.reset(self._duration)
        self.initialize()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def words(self) -> Tuple[str, ...]:
        """The word stream for this session."""
        return self._words

    @property
    def current_word_index(self) -> int:
        """Index of the word being typed (0-based)."""
        return self._index

    @property
    def current_word(self) -> Optional[str]:
        """Word the user should type next, or None once the stream is exhausted."""
        if self._index >= len(self._words):
            return None
        return self._words[self._index]

    @property
    def state(self) -> SessionState:
        """Current lifecycle state."""
        return self._state

    @property
    def input_buffer(self) -> str:
        """Text typed so far for the current word."""
        return self._input_buffer

    @property
    def duration_seconds(self) -> int:
        """Length of a session in seconds."""
        return self._duration

    @property
    def remaining_time(self) -> int:
        """Seconds left on the countdown."""
        return self._timer.remaining

    @property
    def typed_word_count(self) -> int:
        """Number of words submitted so far."""
        return self._typed_word_count

    @property
    def error_count(self) -> int:
        """Total character errors across submitted words."""
        return self._error_count

    @property
    def total_chars_typed(self) -> int:
        """Total characters in submitted words."""
        return self._total_chars_typed

    @property
    def results(self) -> Optional[SessionResults]:
        """Final results, or None until the session finishes."""
        return self._results

    @property
    def wpm(self) -> int:
        """Final words per minute, 0 until the session finishes."""
        return self._results.wpm if self._results is not None else 0

    @property
    def accuracy(self) -> int:
        """Final accuracy in percent, 100 until the session finishes."""
        return self._results.accuracy if self._results is not None else 100

    @property
    def progress_percent(self) -> float:
        """Share of the word stream already submitted, in percent."""
        if not self._words:
            return 0.0
        return (self._index / len(self._words)) * 100.0

    def add_listener(self, callback: Callable[[], None]) -> None:
        """Register *callback* to be called after every state change."""
        self._listeners.append(callback)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Generate a fresh word stream and rewind the cursor."""
        self._words = generate_words(self._word_count, self._dictionary, self._rng)
        self._index = 0
        self._input_buffer = ""
        self._state = SessionState.IDLE

    def on_input_changed(self, raw_value: str) -> None:
        """Handle a change of the input line; a trailing space submits the word."""
        if self._state is SessionState.FINISHED:
            logger.debug("Ignoring input after session finished")
            return
        if self._state is SessionState.IDLE and raw_value:
            self._start()
        if self._state is not SessionState.RUNNING:
            return

        if raw_value.endswith(WORD_SEPARATOR):
            self._submit(raw_value.strip())
        else:
            self._input_buffer = raw_value
        self._notify()

    def on_timer_expired(self) -> None:
        """Finish the session when the countdown runs out."""
        if self._state is not SessionState.RUNNING:
            return
        logger.info("Time is up after %d words", self._typed_word_count)
        self._finish()
        self._notify()

    def on_key_event(self, key: str) -> bool:
        """Handle a key press. Returns True when the key triggered a reset.

        Only Enter on a finished session does anything; every other key,
        paste shortcuts included, is left to the input widget.
        """
        if key == ENTER_KEY and self._state is SessionState.FINISHED:
            self.reset()
            return True
        return False

    def reset(self) -> None:
        """Cancel the countdown and start over with a fresh word stream."""
        self._cancel_ticks()
        self._timer.reset(self._duration)
        self.initialize()
        self._typed_word_count = 0
        self._error_count = 0
        self._total_chars_typed = 0
        self._results = None
        logger.info("Session reset")
        self._notify()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _start(self) -> None:
        self._cancel_ticks()
        self._state = SessionState.RUNNING
        self._timer.start(self._duration)
        self._tick_handle = self._scheduler.schedule(
            functools.partial(self._on_tick, self._generation),
            TICK_INTERVAL_MS,
        )
        logger.info("Session started: %d words, %ds", len(self._words), self._duration)

    def _on_tick(self, generation: int) -> None:
        if generation != self._generation:
            logger.debug("Dropping stale tick from generation %d", generation)
            return
        if self._state is not SessionState.RUNNING:
            return
        self._timer.tick()
        if self._state is SessionState.RUNNING:
            self._notify()

    def _submit(self, typed: str) -> None:
        target = self._words[self._index]
        result = score_word(target, typed)
        self._error_count += result.error_count
        self._typed_word_count += 1
        self._total_chars_typed += result.length
        self._index += 1
        self._input_buffer = ""
        logger.debug("Submitted %r for %r: %d errors", typed, target, result.error_count)

        if self._index >= len(self._words):
            logger.info("Word stream exhausted with %ds left", self._timer.remaining)
            self._finish()

    def _finish(self) -> None:
        self._cancel_ticks()
        self._timer.stop()
        self._state = SessionState.FINISHED
        results = self._compute_results()
        logger.info("Session finished: %d WPM, %d%% accuracy", results.wpm, results.accuracy)

    def _compute_results(self) -> SessionResults:
        if self._results is not None:
            return self._results
        elapsed_seconds = self._duration - self._timer.remaining
        elapsed_minutes = elapsed_seconds / 60.0
        wpm = _round_half_up(self._typed_word_count / elapsed_minutes) if elapsed_minutes > 0 else 0

        if self._total_chars_typed > 0:
            correct_chars = self._total_chars_typed - self._error_count
            accuracy = _round_half_up(100.0 * correct_chars / self._total_chars_typed)
            accuracy = max(0, min(100, accuracy))
        else:
            accuracy = 100

        self._results = SessionResults(
            wpm=max(0, wpm),
            accuracy=accuracy,
            typed_word_count=self._typed_word_count,
            error_count=self._error_count,
            total_chars_typed=self._total_chars_typed,
            elapsed_seconds=elapsed_seconds,
        )
        return self._results

    def _cancel_ticks(self) -> None:
        # Bumping the generation invalidates callbacks a scheduler may still deliver.
        self._generation += 1
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()
