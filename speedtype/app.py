"""Application entry point and setup for the SpeedType typing test."""

import logging
import sys

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QApplication

from speedtype.core.config import SessionConfig, load_config
from speedtype.core.session import TypingSession
from speedtype.core.timer import TickScheduler
from speedtype.core.words import WordRepository
from speedtype.ui.main_window import MainWindow
from speedtype.ui.ticker import QtTickScheduler


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_session(config: SessionConfig, scheduler: TickScheduler) -> TypingSession:
    """Load the bundled dictionary and create a session sized by *config*."""
    repository = WordRepository()
    return TypingSession(
        repository.words(),
        scheduler,
        duration_seconds=config.duration_seconds,
        word_count=config.word_count,
    )


def run() -> None:
    """Initialize the application, build the session, and start the main window."""
    config = load_config()
    configure_logging(config.log_level_number)
    logging.info(
        "Starting SpeedType: %ds test, %d words", config.duration_seconds, config.word_count
    )

    app = QApplication(sys.argv)
    app.setApplicationName("SpeedType")
    app.setApplicationDisplayName("SpeedType Pro")

    app_font = QFont()
    app_font.setPointSize(11)
    app.setFont(app_font)

    scheduler = QtTickScheduler(app)
    session = build_session(config, scheduler)

    window = MainWindow(session)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
