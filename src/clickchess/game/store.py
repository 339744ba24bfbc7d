"""Key-value snapshot stores.

Follows Dependency Inversion: the session layer depends on the
:class:`SnapshotStore` ABC, not on a concrete storage backend.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any

DEFAULT_SESSION_KEY = "chess-game"


class SnapshotStore(ABC):
    """Persists one plain-data snapshot per key."""

    @abstractmethod
    def load(self, key: str) -> dict[str, Any] | None:
        """Return the snapshot stored under *key*, or ``None``."""

    @abstractmethod
    def save(self, key: str, data: dict[str, Any]) -> None:
        """Store *data* under *key*, replacing any previous snapshot."""

    @abstractmethod
    def clear(self, key: str) -> None:
        """Forget the snapshot under *key* (no-op if absent)."""


class MemoryStore(SnapshotStore):
    """In-process store; keeps deep copies so callers cannot alias state."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: dict[str, dict[str, Any]] = {}

    def load(self, key: str) -> dict[str, Any] | None:
        data = self._items.get(key)
        return copy.deepcopy(data) if data is not None else None

    def save(self, key: str, data: dict[str, Any]) -> None:
        self._items[key] = copy.deepcopy(data)

    def clear(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._items
