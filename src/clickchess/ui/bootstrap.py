"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)

ORGANIZATION_NAME = "clickchess"
APPLICATION_NAME = "clickchess"


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from clickchess.ui.styles.theme import APP_STYLE

    app.setOrganizationName(ORGANIZATION_NAME)
    app.setApplicationName(APPLICATION_NAME)
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from clickchess.game.qt_store import QSettingsStore
    from clickchess.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(store=QSettingsStore())
    window.show()
    _LOGGER.info("Started %s", APPLICATION_NAME)

    return app.exec()
