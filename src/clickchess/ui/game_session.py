"""GameSession — Qt-facing owner of one engine and its persistence."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from clickchess.core.enums import GameStatus
from clickchess.core.types import Square, on_board
from clickchess.game.engine import ChessEngine
from clickchess.game.snapshot import SnapshotError, engine_to_dict, restore_engine
from clickchess.game.store import SnapshotStore
from clickchess.ui import messages
from clickchess.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


class GameSession(QObject):
    """Routes clicks to a :class:`ChessEngine` and publishes the result.

    Signals:
        state_changed(): The engine state changed; widgets should re-render.
        notification(str, str): ``(kind, text)`` banner for the user.
    """

    state_changed = pyqtSignal()
    notification = pyqtSignal(str, str)

    def __init__(
        self,
        store: SnapshotStore | None = None,
        settings: AppSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else AppSettings()
        self._store = store
        self._quiet = False
        self._engine = ChessEngine(self._settings.rules)
        self._engine.events.on_status_changed.append(self._on_status_changed)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> ChessEngine:
        return self._engine

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def valid_moves(self) -> list[Square]:
        """Destinations of the currently selected piece."""
        selected = self._engine.selected
        if selected is None:
            return []
        return self._engine.get_valid_moves(selected)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self) -> None:
        """Resume the stored game if there is one, otherwise start fresh."""
        if self.restore():
            self.notification.emit(messages.INFO, messages.RESTORED)
        if self._engine.status == GameStatus.WAITING:
            self._quiet = True
            try:
                self._engine.initialize()
            finally:
                self._quiet = False
        self._changed()

    def restore(self) -> bool:
        """Load the stored snapshot. Returns True if one was applied."""
        if self._store is None:
            return False
        key = self._settings.session_key
        data = self._store.load(key)
        if data is None:
            return False

        self._quiet = True
        try:
            restore_engine(self._engine, data)
        except SnapshotError as exc:
            _LOGGER.warning("Ignoring stored game %r: %s", key, exc)
            self._store.clear(key)
            return False
        finally:
            self._quiet = False

        self.state_changed.emit()
        return True

    def reset(self) -> None:
        """Start a new game from the initial position."""
        self._quiet = True
        try:
            self._engine.reset_game()
            self._engine.initialize()
        finally:
            self._quiet = False
        self.notification.emit(messages.INFO, messages.RESET_DONE)
        self._changed()

    # ── Interaction ──────────────────────────────────────────────────────

    def click(self, row: int, col: int) -> None:
        """Forward a board click at ``(row, col)`` to the engine."""
        if not on_board(row, col):
            return
        self._engine.select_square(Square(row, col))
        self._changed()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _changed(self) -> None:
        if self._store is not None and self._settings.autosave:
            self._store.save(self._settings.session_key, engine_to_dict(self._engine))
        self.state_changed.emit()

    def _on_status_changed(self, status: GameStatus) -> None:
        if self._quiet:
            return
        banner = messages.status_banner(status, self._engine.current_turn)
        if banner is not None:
            kind, text = banner
            self.notification.emit(kind, text)
