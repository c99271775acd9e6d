"""Theme colors and threshold color mapping for the UI."""


class Colors:
    """Light theme palette."""

    BG_TOP = "#eef2ff"
    BG_MIDDLE = "#e0e7ff"
    BG_BOTTOM = "#c7d2fe"

    PRIMARY = "#6366f1"
    PRIMARY_LIGHT = "#a5b4fc"
    PRIMARY_DARK = "#4338ca"

    GOOD = "#10b981"
    FAIR = "#f59e0b"
    POOR = "#ef4444"

    CARD_BG = "rgba(255, 255, 255, 0.85)"
    CARD_BORDER = "rgba(255, 255, 255, 0.6)"

    TEXT_PRIMARY = "#1e1b4b"
    TEXT_SECONDARY = "#4b5563"
    TEXT_MUTED = "#9ca3af"

    # Word stream cells
    WORD_COMPLETED_BG = "#ecfdf5"
    WORD_CURRENT_BG = "#eef2ff"
    WORD_UPCOMING_BG = "#ffffff"

    PROGRESS_TRACK = "#e5e7eb"


def wpm_color(wpm: float) -> str:
    """Green from 60 WPM, amber from 40, red below."""
    if wpm >= 60:
        return Colors.GOOD
    if wpm >= 40:
        return Colors.FAIR
    return Colors.POOR


def accuracy_color(accuracy: float) -> str:
    """Green from 90%, amber from 80%, red below."""
    if accuracy >= 90:
        return Colors.GOOD
    if accuracy >= 80:
        return Colors.FAIR
    return Colors.POOR
