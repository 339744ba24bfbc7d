"""MovePanel — scrollable, numbered list of played moves."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QListWidget, QVBoxLayout, QWidget

from clickchess.ui import messages


class MovePanel(QWidget):
    """Displays the game's move history."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._history: tuple[str, ...] = ()
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel("Move History")
        self._header.setFont(QFont("Helvetica", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self._list)

    def set_history(self, history: tuple[str, ...]) -> None:
        history = tuple(history)
        if history == self._history and self._list.count():
            return
        self._history = history
        self._list.clear()

        if not history:
            self._list.addItem(messages.NO_MOVES)
            return
        for line in messages.numbered_history(history):
            self._list.addItem(line)
        self._list.scrollToBottom()

    def lines(self) -> list[str]:
        return [self._list.item(i).text() for i in range(self._list.count())]
