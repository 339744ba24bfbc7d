"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

# Widgets and QSettings must work on headless runners.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
