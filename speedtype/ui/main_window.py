from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QEvent, QObject, Qt, QTimer
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from speedtype.core.session import ENTER_KEY, SessionState, TypingSession
from speedtype.ui.colors import Colors, accuracy_color, wpm_color
from speedtype.ui.models import progress_caption
from speedtype.ui.typing_widgets import ProgressBar, StatCard, WordStreamWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single-screen typing test window.

    Renders the session after every change it reports and forwards text edits
    and key presses from the input line into it.
    """

    def __init__(self, session: TypingSession) -> None:
        super().__init__()
        self._session = session

        self._time_card: Optional[StatCard] = None
        self._wpm_card: Optional[StatCard] = None
        self._accuracy_card: Optional[StatCard] = None
        self._word_stream: Optional[WordStreamWidget] = None
        self._progress_bar: Optional[ProgressBar] = None
        self._progress_position_label: Optional[QLabel] = None
        self._progress_percent_label: Optional[QLabel] = None
        self._current_word_label: Optional[QLabel] = None
        self._results_panel: Optional[QFrame] = None
        self._results_wpm_label: Optional[QLabel] = None
        self._results_accuracy_label: Optional[QLabel] = None
        self._results_words_label: Optional[QLabel] = None
        self.input_box: Optional[QLineEdit] = None

        self._build_ui()
        self._session.add_listener(self._render)
        self._render()
        QTimer.singleShot(0, self.input_box.setFocus)

    def _build_ui(self) -> None:
        self.setWindowTitle("SpeedType Pro")
        self.resize(980, 720)

        root = QWidget()
        root.setObjectName("root")
        root.setStyleSheet(
            f"""
            QWidget#root {{
                background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                    stop:0 {Colors.BG_TOP}, stop:0.5 {Colors.BG_MIDDLE}, stop:1 {Colors.BG_BOTTOM});
            }}
            """
        )
        layout = QVBoxLayout(root)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(18)

        title = QLabel("SpeedType Pro")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {Colors.PRIMARY_DARK}; font-size: 34px; font-weight: 900;")
        layout.addWidget(title)
        subtitle = QLabel("Type words as fast as you can!")
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; font-size: 15px;")
        layout.addWidget(subtitle)

        stats_row = QHBoxLayout()
        stats_row.setSpacing(16)
        self._time_card = StatCard("Time Remaining", "")
        self._wpm_card = StatCard("Words Per Minute", "")
        self._accuracy_card = StatCard("Accuracy", "")
        for card in (self._time_card, self._wpm_card, self._accuracy_card):
            stats_row.addWidget(card, 1)
        layout.addLayout(stats_row)

        self._word_stream = WordStreamWidget()
        layout.addWidget(self._word_stream, 1)

        self._progress_bar = ProgressBar(height=10)
        layout.addWidget(self._progress_bar)
        progress_text = QHBoxLayout()
        self._progress_position_label = QLabel()
        self._progress_percent_label = QLabel()
        for lbl in (self._progress_position_label, self._progress_percent_label):
            lbl.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; font-size: 12px;")
        progress_text.addWidget(self._progress_position_label)
        progress_text.addStretch(1)
        progress_text.addWidget(self._progress_percent_label)
        layout.addLayout(progress_text)

        self.input_box = QLineEdit()
        self.input_box.setStyleSheet(
            f"""
            QLineEdit {{
                background: white;
                border: 2px solid {Colors.PRIMARY_LIGHT};
                border-radius: 12px;
                padding: 10px 14px;
                font-size: 20px;
                color: {Colors.TEXT_PRIMARY};
            }}
            QLineEdit:focus {{ border-color: {Colors.PRIMARY}; }}
            """
        )
        self.input_box.textEdited.connect(self._on_text_edited)
        self.input_box.installEventFilter(self)
        layout.addWidget(self.input_box)

        self._current_word_label = QLabel()
        self._current_word_label.setAlignment(Qt.AlignCenter)
        self._current_word_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; font-size: 14px;")
        layout.addWidget(self._current_word_label)

        layout.addWidget(self._build_results_panel())

        controls = QHBoxLayout()
        restart_button = QPushButton("Restart Test")
        restart_button.setCursor(Qt.PointingHandCursor)
        restart_button.setStyleSheet(
            f"""
            QPushButton {{
                background: {Colors.PRIMARY};
                color: white;
                border: none;
                border-radius: 10px;
                padding: 10px 20px;
                font-size: 14px;
                font-weight: 700;
            }}
            QPushButton:hover {{ background: {Colors.PRIMARY_DARK}; }}
            """
        )
        restart_button.clicked.connect(self._restart)
        controls.addWidget(restart_button)
        controls.addStretch(1)
        instructions = QLabel("Type each word and press Space to continue")
        instructions.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; font-size: 13px;")
        controls.addWidget(instructions)
        layout.addLayout(controls)

        footer = QLabel("Type each word and press Space • Copy and paste are allowed • Focus on speed!")
        footer.setAlignment(Qt.AlignCenter)
        footer.setStyleSheet(f"color: {Colors.TEXT_MUTED}; font-size: 12px;")
        layout.addWidget(footer)

        self.setCentralWidget(root)

    def _build_results_panel(self) -> QFrame:
        panel = QFrame()
        panel.setObjectName("resultsPanel")
        panel.setStyleSheet(
            f"""
            QFrame#resultsPanel {{
                background: {Colors.CARD_BG};
                border: 1px solid {Colors.CARD_BORDER};
                border-radius: 20px;
            }}
            """
        )
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(24, 16, 24, 16)
        heading = QLabel("Test Complete!")
        heading.setAlignment(Qt.AlignCenter)
        heading.setStyleSheet(f"color: {Colors.PRIMARY_DARK}; font-size: 22px; font-weight: 800;")
        layout.addWidget(heading)

        row = QHBoxLayout()
        self._results_wpm_label = QLabel()
        self._results_accuracy_label = QLabel()
        self._results_words_label = QLabel()
        for lbl in (self._results_wpm_label, self._results_accuracy_label, self._results_words_label):
            lbl.setAlignment(Qt.AlignCenter)
            lbl.setTextFormat(Qt.RichText)
            row.addWidget(lbl, 1)
        layout.addLayout(row)

        hint = QLabel("Press Enter or click restart to try again")
        hint.setAlignment(Qt.AlignCenter)
        hint.setStyleSheet(f"color: {Colors.TEXT_MUTED}; font-size: 12px;")
        layout.addWidget(hint)

        panel.setVisible(False)
        self._results_panel = panel
        return panel

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self.input_box and event.type() == QEvent.Type.KeyPress:
            key_event: QKeyEvent = event
            if key_event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
                return self._session.on_key_event(ENTER_KEY)
        return super().eventFilter(obj, event)

    def _on_text_edited(self, text: str) -> None:
        self._session.on_input_changed(text)

    def _restart(self) -> None:
        logger.debug("Restart requested")
        self._session.reset()
        self.input_box.setFocus()

    def _render(self) -> None:
        session = self._session
        finished = session.state is SessionState.FINISHED

        self._time_card.set_value(f"{session.remaining_time}s")
        self._wpm_card.set_value(f"{session.wpm}", wpm_color(session.wpm))
        self._accuracy_card.set_value(f"{session.accuracy}%", accuracy_color(session.accuracy))

        self._word_stream.set_words(session.words, session.current_word_index)
        self._progress_bar.set_percent(session.progress_percent)
        position, percent = progress_caption(session.current_word_index, len(session.words))
        self._progress_position_label.setText(position)
        self._progress_percent_label.setText(percent)

        current = session.current_word
        self._current_word_label.setVisible(current is not None)
        if current is not None:
            self._current_word_label.setText(f"Current word: <b>{current}</b>")

        if self.input_box.text() != session.input_buffer:
            self.input_box.setText(session.input_buffer)
        self.input_box.setReadOnly(finished)
        self.input_box.setPlaceholderText("Press Enter to restart" if finished else "Start typing here...")

        self._results_panel.setVisible(finished)
        if finished:
            self._results_wpm_label.setText(self._final_stat("Final WPM", str(session.wpm), wpm_color(session.wpm)))
            self._results_accuracy_label.setText(
                self._final_stat("Accuracy", f"{session.accuracy}%", accuracy_color(session.accuracy))
            )
            self._results_words_label.setText(
                self._final_stat("Words Typed", str(session.typed_word_count), Colors.PRIMARY)
            )

    @staticmethod
    def _final_stat(label: str, value: str, color: str) -> str:
        return (
            f"<span style='color:{Colors.TEXT_SECONDARY}; font-size:13px;'>{label}</span><br/>"
            f"<span style='color:{color}; font-size:26px; font-weight:900;'>{value}</span>"
        )
