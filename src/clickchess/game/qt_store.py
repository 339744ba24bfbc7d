"""QSettings-backed snapshot store."""

from __future__ import annotations

import json
import logging
from typing import Any

from PyQt6.QtCore import QSettings

from clickchess.game.store import SnapshotStore

_LOGGER = logging.getLogger(__name__)
_GROUP = "snapshots"


class QSettingsStore(SnapshotStore):
    """Stores snapshots as JSON text in a :class:`QSettings` instance.

    Args:
        settings: Backing settings; defaults to the application's native
            user scope (organisation / application name from QCoreApplication).
    """

    __slots__ = ("_settings",)

    def __init__(self, settings: QSettings | None = None) -> None:
        self._settings = settings if settings is not None else QSettings()

    def _path(self, key: str) -> str:
        return f"{_GROUP}/{key}"

    def load(self, key: str) -> dict[str, Any] | None:
        raw = self._settings.value(self._path(key))
        if raw is None:
            return None
        try:
            data = json.loads(str(raw))
        except json.JSONDecodeError:
            _LOGGER.warning("Discarding unreadable snapshot %r", key)
            return None
        if not isinstance(data, dict):
            _LOGGER.warning("Discarding non-object snapshot %r", key)
            return None
        return data

    def save(self, key: str, data: dict[str, Any]) -> None:
        self._settings.setValue(self._path(key), json.dumps(data))
        self._settings.sync()

    def clear(self, key: str) -> None:
        self._settings.remove(self._path(key))
        self._settings.sync()
