"""StatusPanel — turn, status, captured pieces and the reset button."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QFormLayout,
    QGroupBox,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from clickchess.core.enums import Color, GameStatus
from clickchess.game.engine import CapturedPieces
from clickchess.ui import messages


class StatusPanel(QWidget):
    """Shows whose turn it is, the game status and both capture groups."""

    reset_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        status_box = QGroupBox("Game Status")
        status_form = QFormLayout(status_box)
        self._turn_label = QLabel()
        self._status_label = QLabel()
        status_form.addRow("Current Turn:", self._turn_label)
        status_form.addRow("Status:", self._status_label)
        layout.addWidget(status_box)

        captured_box = QGroupBox("Captured Pieces")
        captured_form = QFormLayout(captured_box)
        glyph_font = QFont("DejaVu Sans", 14)
        self._captured_labels: dict[Color, QLabel] = {}
        for color in (Color.WHITE, Color.BLACK):
            label = QLabel()
            label.setFont(glyph_font)
            label.setWordWrap(True)
            captured_form.addRow(f"{messages.color_name(color)} Captured:", label)
            self._captured_labels[color] = label
        layout.addWidget(captured_box)

        self._btn_reset = QPushButton("Reset Game")
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.clicked.connect(self.reset_clicked)
        layout.addWidget(self._btn_reset)

    def set_state(
        self,
        current_turn: Color,
        status: GameStatus,
        captured: CapturedPieces,
    ) -> None:
        self._turn_label.setText(messages.color_name(current_turn))
        self._status_label.setText(messages.status_name(status))
        alert = status in (GameStatus.CHECK, GameStatus.CHECKMATE)
        self._status_label.setStyleSheet("color: #ef4444;" if alert else "color: #22c55e;")
        for color in (Color.WHITE, Color.BLACK):
            text = " ".join(messages.capture_glyph(p.piece_type) for p in captured.of(color))
            self._captured_labels[color].setText(text or messages.NONE_CAPTURED)

    def turn_text(self) -> str:
        return self._turn_label.text()

    def status_text(self) -> str:
        return self._status_label.text()

    def captured_text(self, color: Color) -> str:
        return self._captured_labels[color].text()
