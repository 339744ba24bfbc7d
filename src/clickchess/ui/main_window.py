"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from clickchess.game.store import SnapshotStore
from clickchess.ui import messages
from clickchess.ui.board.board_view import BoardView
from clickchess.ui.game_session import GameSession
from clickchess.ui.panels.move_panel import MovePanel
from clickchess.ui.panels.status_panel import StatusPanel
from clickchess.ui.settings import AppSettings

_NOTIFICATION_TIMEOUT_MS = 4000


class MainWindow(QMainWindow):
    """Main application window: board on the left, panels on the right."""

    def __init__(
        self,
        store: SnapshotStore | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Chess Game")
        self.setMinimumSize(800, 560)
        self.resize(1000, 680)

        self._session = GameSession(store=store, settings=settings, parent=self)
        self._setup_ui()
        self._connect_signals()
        self._apply_settings()
        self._session.start()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_panel(self) -> StatusPanel:
        return self._status_panel

    @property
    def move_panel(self) -> MovePanel:
        return self._move_panel

    # ── Construction ─────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(8, 8, 8, 8)

        board_column = QVBoxLayout()
        self._turn_banner = QLabel()
        board_column.addWidget(self._turn_banner)
        self._board_view = BoardView()
        board_column.addWidget(self._board_view, stretch=1)
        root.addLayout(board_column, stretch=3)

        side = QVBoxLayout()
        self._status_panel = StatusPanel()
        side.addWidget(self._status_panel)
        self._move_panel = MovePanel()
        side.addWidget(self._move_panel, stretch=1)
        root.addLayout(side, stretch=1)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

    def _connect_signals(self) -> None:
        self._board_view.square_clicked.connect(self._session.click)
        self._status_panel.reset_clicked.connect(self._on_reset_clicked)
        self._session.state_changed.connect(self._refresh)
        self._session.notification.connect(self._on_notification)

    def _apply_settings(self) -> None:
        s = self._session.settings
        scene = self._board_view.board_scene
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_valid_moves(s.show_valid_moves)
        scene.set_show_last_move(s.highlight_last_move)

    # ── Slots ────────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        """Re-render every widget from the engine's current state."""
        engine = self._session.engine
        last = engine.last_move
        check_square = None
        if engine.is_in_check(engine.current_turn):
            check_square = engine.board.king_square(engine.current_turn)

        self._board_view.board_scene.render_state(
            engine.board,
            selected=engine.selected,
            valid_moves=self._session.valid_moves(),
            last_move=None if last is None else (last.from_sq, last.to_sq),
            check_square=check_square,
        )
        self._turn_banner.setText(messages.turn_label(engine.current_turn))
        self._status_panel.set_state(
            engine.current_turn,
            engine.status,
            engine.captured,
        )
        self._move_panel.set_history(engine.move_history)

    def _on_reset_clicked(self) -> None:
        if self._session.settings.confirm_reset:
            answer = QMessageBox.question(
                self,
                messages.RESET_TITLE,
                messages.RESET_CONFIRM,
                QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            )
            if answer != QMessageBox.StandardButton.Yes:
                return
        self._session.reset()

    def _on_notification(self, kind: str, text: str) -> None:
        del kind
        self._status_bar.showMessage(text, _NOTIFICATION_TIMEOUT_MS)

    def status_message(self) -> str:
        return self._status_bar.currentMessage()
