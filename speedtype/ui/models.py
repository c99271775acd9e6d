"""Data models used by the UI."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Sequence


class WordStatus(enum.Enum):
    COMPLETED = "completed"
    CURRENT = "current"
    UPCOMING = "upcoming"


@dataclass
class WordCell:
    """One word of the stream as the view draws it."""

    word: str
    status: WordStatus


def build_word_cells(words: Sequence[str], current_index: int) -> List[WordCell]:
    """Mark words before *current_index* completed, the one at it current."""
    cells: List[WordCell] = []
    for i, word in enumerate(words):
        if i < current_index:
            status = WordStatus.COMPLETED
        elif i == current_index:
            status = WordStatus.CURRENT
        else:
            status = WordStatus.UPCOMING
        cells.append(WordCell(word=word, status=status))
    return cells


def progress_caption(current_index: int, total: int) -> tuple[str, str]:
    """Return ("Word i of n", "p% complete") for the progress row."""
    pct = (current_index / total) * 100 if total else 0.0
    position = min(current_index + 1, total) if total else 0
    return f"Word {position} of {total}", f"{pct:.1f}% complete"


def layout_word_boxes(widths: Sequence[int], max_width: int, spacing: int) -> List[tuple[int, int]]:
    """Flow boxes of *widths* into rows; return (row, x) for each box.

    A box that would cross the right edge starts a new row, unless it is
    already first in its row.
    """
    boxes: List[tuple[int, int]] = []
    row = 0
    x = spacing
    for width in widths:
        if x + width > max_width - spacing and x > spacing:
            row += 1
            x = spacing
        boxes.append((row, x))
        x += width + spacing
    return boxes


def first_visible_row(current_row: int, visible_rows: int) -> int:
    """First row to draw so that *current_row* is on screen.

    No scrolling while the current row fits; past that, the row just above
    the current one stays visible for context.
    """
    if visible_rows <= 0 or current_row < visible_rows:
        return 0
    return current_row - min(1, visible_rows - 1)
