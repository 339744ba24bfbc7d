"""Fixtures for widget tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _close_top_level_widgets(qapp) -> Iterator[None]:
    """Every UI test gets the QApplication and leaves no windows behind."""
    yield
    for widget in list(qapp.topLevelWidgets()):
        widget.close()
    qapp.processEvents()
