"""Visual theme constants and QSS styles for clickchess."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    selected: QColor  # selected piece origin
    valid_move: QColor  # dot on empty destination squares
    valid_capture: QColor  # ring on occupied destination squares
    last_move: QColor  # last move origin and destination
    check: QColor  # king in check
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(253, 230, 138),  # amber
            dark_square=QColor(146, 64, 14),  # dark amber
            selected=QColor(59, 130, 246, 140),  # blue
            valid_move=QColor(59, 130, 246, 80),
            valid_capture=QColor(239, 68, 68, 200),  # red
            last_move=QColor(255, 255, 255, 70),
            check=QColor(255, 0, 0, 120),
            coord_light=QColor(253, 230, 138),
            coord_dark=QColor(146, 64, 14),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            selected=QColor(255, 255, 0, 100),
            valid_move=QColor(0, 0, 0, 40),
            valid_capture=QColor(200, 30, 30, 160),
            last_move=QColor(155, 199, 0, 105),
            check=QColor(255, 0, 0, 120),
            coord_light=QColor(240, 217, 181),
            coord_dark=QColor(181, 136, 99),
        )


APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QGroupBox {
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
    border-radius: 4px;
    margin-top: 12px;
    padding-top: 6px;
}
QGroupBox::title {
    subcontrol-origin: margin;
    left: 8px;
}

QListWidget {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-family: "Consolas", monospace;
    font-size: 13px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}

QStatusBar {
    color: #e0e0e0;
}
"""
