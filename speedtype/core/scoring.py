from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WordScore:
    """Result of comparing one submitted word with its target."""

    error_count: int
    length: int


def score_word(expected: str, submitted: str) -> WordScore:
    """Count positional mismatches plus missing or extra trailing characters.

    ``length`` is the submitted word's length; it feeds the session's
    total-characters-typed counter.
    """
    mismatches = sum(1 for a, b in zip(expected, submitted) if a != b)
    mismatches += abs(len(expected) - len(submitted))
    return WordScore(error_count=mismatches, length=len(submitted))
