"""Typing practice UI: word stream, progress bar and stat card."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QFontMetrics, QLinearGradient, QPainter, QPen
from PySide6.QtWidgets import QFrame, QGraphicsDropShadowEffect, QLabel, QVBoxLayout, QWidget

from speedtype.ui.colors import Colors
from speedtype.ui.models import (
    WordCell,
    WordStatus,
    build_word_cells,
    first_visible_row,
    layout_word_boxes,
)


class WordStreamWidget(QWidget):
    """Wrapped rows of word boxes: completed (green), current (indigo), upcoming (gray)."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._cells: list[WordCell] = []
        self._current_index: int = 0
        self.setMinimumSize(400, 160)
        # Words are for reading only
        self.setFocusPolicy(Qt.NoFocus)

    def set_words(self, words: tuple[str, ...], current_index: int) -> None:
        self._cells = build_word_cells(words, current_index)
        self._current_index = max(0, min(current_index, len(self._cells) - 1))
        self.update()

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        if not self._cells:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        font = painter.font()
        font.setPointSize(15)
        painter.setFont(font)
        metrics = QFontMetrics(font)

        pad_x, pad_y = 10, 6
        spacing = 8
        box_h = metrics.height() + pad_y * 2
        row_h = box_h + spacing
        widths = [metrics.horizontalAdvance(cell.word) + pad_x * 2 for cell in self._cells]
        boxes = layout_word_boxes(widths, self.width(), spacing)

        # Scroll so the current word's row stays on screen
        visible_rows = max(1, (self.height() - spacing) // row_h)
        top_row = first_visible_row(boxes[self._current_index][0], visible_rows)

        for cell, box_w, (row, x) in zip(self._cells, widths, boxes):
            if row < top_row:
                continue
            if row >= top_row + visible_rows:
                break
            y = spacing + (row - top_row) * row_h

            if cell.status is WordStatus.COMPLETED:
                painter.setBrush(QColor(Colors.WORD_COMPLETED_BG))
                painter.setPen(QPen(QColor(Colors.GOOD), 1))
                text_color = QColor(Colors.GOOD)
            elif cell.status is WordStatus.CURRENT:
                painter.setBrush(QColor(Colors.WORD_CURRENT_BG))
                painter.setPen(QPen(QColor(Colors.PRIMARY), 2))
                text_color = QColor(Colors.PRIMARY_DARK)
            else:
                painter.setBrush(QColor(Colors.WORD_UPCOMING_BG))
                painter.setPen(QPen(QColor(Colors.PROGRESS_TRACK), 1))
                text_color = QColor(Colors.TEXT_MUTED)
            painter.drawRoundedRect(x, y, box_w, box_h, 8, 8)
            painter.setPen(text_color)
            f = painter.font()
            f.setBold(cell.status is WordStatus.CURRENT)
            painter.setFont(f)
            painter.drawText(x, y, box_w, box_h, Qt.AlignCenter, cell.word)


class ProgressBar(QWidget):
    """Rounded gradient progress bar."""

    def __init__(self, parent: Optional[QWidget] = None, *, height: int = 10) -> None:
        super().__init__(parent)
        self._percent = 0.0
        self.setFixedHeight(height)
        self.setMinimumWidth(100)

    def set_percent(self, percent: float) -> None:
        self._percent = max(0.0, min(100.0, float(percent)))
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setPen(Qt.NoPen)
        radius = min(8, self.height() // 2)

        painter.setBrush(QColor(Colors.PROGRESS_TRACK))
        painter.drawRoundedRect(0, 0, self.width(), self.height(), radius, radius)

        fill_width = int(self.width() * self._percent / 100.0)
        if fill_width > 0:
            gradient = QLinearGradient(0, 0, fill_width, 0)
            gradient.setColorAt(0, QColor(Colors.PRIMARY_LIGHT))
            gradient.setColorAt(1, QColor(Colors.PRIMARY))
            painter.setBrush(gradient)
            painter.drawRoundedRect(0, 0, fill_width, self.height(), radius, radius)


class StatCard(QFrame):
    def __init__(self, label: str, value: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("statCard")
        self.setStyleSheet(
            f"""
            QFrame#statCard {{
                background: {Colors.CARD_BG};
                border: 1px solid {Colors.CARD_BORDER};
                border-radius: 16px;
            }}
            """
        )
        layout = QVBoxLayout(self)
        layout.setContentsMargins(18, 14, 18, 14)
        layout.setSpacing(4)
        self.value_label = QLabel(str(value))
        self.value_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.value_label)
        label_widget = QLabel(label)
        label_widget.setAlignment(Qt.AlignCenter)
        label_widget.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; font-size: 12px; font-weight: 600;")
        layout.addWidget(label_widget)
        self.set_value(value)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(20)
        shadow.setOffset(0, 4)
        shadow.setColor(QColor(30, 27, 75, 30))
        self.setGraphicsEffect(shadow)

    def set_value(self, value: str, color: str = Colors.PRIMARY) -> None:
        self.value_label.setText(str(value))
        self.value_label.setStyleSheet(f"color: {color}; font-size: 30px; font-weight: 900;")
