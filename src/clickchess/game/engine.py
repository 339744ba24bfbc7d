"""ChessEngine — the single-session chess rule engine.

Owns board, turn, selection, status, history, captures and last move.
Every public operation runs to completion synchronously; state is only ever
replaced wholesale, so a reader never observes a half-applied move.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from clickchess.core.board import Board
from clickchess.core.enums import Color, GameStatus, MoveError, PieceType
from clickchess.core.move_generator import MoveGenerator
from clickchess.core.notation import move_notation
from clickchess.core.piece import Piece
from clickchess.core.rules import RuleConfig, Rules
from clickchess.core.types import Square

_LOGGER = logging.getLogger(__name__)

# ── Value objects ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class LastMove:
    """Origin and destination of the most recent move."""

    from_sq: Square
    to_sq: Square


@dataclass(frozen=True, slots=True)
class CapturedPieces:
    """Captured pieces, grouped by the color of the piece that was taken."""

    white: tuple[Piece, ...] = ()
    black: tuple[Piece, ...] = ()

    def of(self, color: Color) -> tuple[Piece, ...]:
        return self.white if color == Color.WHITE else self.black

    def with_capture(self, piece: Piece) -> CapturedPieces:
        if piece.color == Color.WHITE:
            return CapturedPieces(self.white + (piece,), self.black)
        return CapturedPieces(self.white, self.black + (piece,))


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of a move request. ``error`` is ``None`` on success."""

    error: MoveError | None = None
    notation: str | None = None
    captured: Piece | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Square, Square, str], None]  # from, to, notation
StatusCallback = Callable[[GameStatus], None]
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class ChessEngine:
    """Hot-seat chess game state machine driven by square clicks.

    Moves are pseudo-legal unless ``config.enforce_king_safety`` is set.
    One instance serves exactly one game session.
    """

    __slots__ = (
        "_config",
        "_board",
        "_current_turn",
        "_selected",
        "_status",
        "_history",
        "_captured",
        "_last_move",
        "events",
    )

    def __init__(self, config: RuleConfig | None = None) -> None:
        self._config = config if config is not None else RuleConfig()
        self.events = GameEvents()
        self._board = Board.initial()
        self._current_turn = Color.WHITE
        self._selected: Square | None = None
        self._status = GameStatus.WAITING
        self._history: tuple[str, ...] = ()
        self._captured = CapturedPieces()
        self._last_move: LastMove | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> RuleConfig:
        return self._config

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_turn(self) -> Color:
        return self._current_turn

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def move_history(self) -> tuple[str, ...]:
        return self._history

    @property
    def captured(self) -> CapturedPieces:
        return self._captured

    @property
    def last_move(self) -> LastMove | None:
        return self._last_move

    @property
    def is_game_over(self) -> bool:
        return self._status.is_terminal

    @property
    def winner(self) -> Color | None:
        """Winning color after checkmate, else ``None``."""
        if self._status == GameStatus.CHECKMATE:
            return self._current_turn.opposite
        return None

    # ── Lifecycle ────────────────────────────────────────────────────────

    def initialize(self) -> None:
        """Set up the standard starting position and start play."""
        self._start(GameStatus.PLAYING)

    def reset_game(self) -> None:
        """Starting position, but waiting for :meth:`initialize`."""
        self._start(GameStatus.WAITING)

    def restore_state(
        self,
        *,
        board: Board,
        current_turn: Color,
        status: GameStatus,
        move_history: Sequence[str] = (),
        captured: CapturedPieces | None = None,
        last_move: LastMove | None = None,
        selected: Square | None = None,
    ) -> None:
        """Replace the whole state, e.g. from a persisted snapshot."""
        if selected is not None:
            piece = board[selected]
            if piece is None or piece.color != current_turn:
                selected = None
        previous = self._status
        self._board = board
        self._current_turn = current_turn
        self._selected = selected
        self._status = status
        self._history = tuple(move_history)
        self._captured = captured if captured is not None else CapturedPieces()
        self._last_move = last_move
        if status != previous:
            self._emit_status(status)

    # ── Interaction ──────────────────────────────────────────────────────

    def select_square(self, sq: Square) -> None:
        """Two-phase click protocol: select a piece, then pick its destination.

        Clicking another piece of the side to move re-selects; any other click
        attempts a move and clears the selection whether or not it succeeded.
        """
        piece = self._board[sq]
        own_piece = piece is not None and piece.color == self._current_turn

        if self._selected is None:
            if own_piece:
                self._selected = sq
            return

        if own_piece:
            self._selected = sq
            return

        from_sq = self._selected
        self.try_move(from_sq, sq)
        self._selected = None

    def clear_selection(self) -> None:
        self._selected = None

    def move_piece(self, from_sq: Square, to_sq: Square) -> bool:
        """Apply a move. Returns True if it was valid and applied."""
        return self.try_move(from_sq, to_sq).ok

    def try_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Apply a move, reporting why it was rejected if it was."""
        piece = self._board[from_sq]
        if piece is None:
            return self._reject(MoveError.NO_PIECE_AT_SOURCE, from_sq, to_sq)
        if piece.color != self._current_turn:
            return self._reject(MoveError.WRONG_TURN, from_sq, to_sq)
        if self._status.is_terminal:
            return self._reject(MoveError.GAME_OVER, from_sq, to_sq)
        if to_sq not in self.get_valid_moves(from_sq):
            return self._reject(MoveError.ILLEGAL_DESTINATION, from_sq, to_sq)

        captured = self._board[to_sq]
        board = self._board.move(from_sq, to_sq)
        captures = self._captured
        if captured is not None:
            captures = captures.with_capture(captured)
            if captured.piece_type == PieceType.KING:
                _LOGGER.warning("%s king captured on %s", captured.color, to_sq)
        notation = move_notation(piece, from_sq, to_sq)
        next_turn = self._current_turn.opposite
        status = Rules.status_after_move(board, next_turn, self._config)

        previous = self._status
        self._board = board
        self._captured = captures
        self._history = self._history + (notation,)
        self._last_move = LastMove(from_sq, to_sq)
        self._current_turn = next_turn
        self._status = status

        _LOGGER.debug("Move %s applied, %s to move, status %s", notation, next_turn, status)
        for cb in self.events.on_move:
            cb(from_sq, to_sq, notation)
        if status != previous:
            self._emit_status(status)
        return MoveOutcome(notation=notation, captured=captured)

    # ── Queries ──────────────────────────────────────────────────────────

    def get_valid_moves(self, sq: Square) -> list[Square]:
        """Destinations for the side-to-move piece on *sq*.

        Empty when the square is empty, holds an opponent piece, or the game
        is over.
        """
        piece = self._board[sq]
        if piece is None or piece.color != self._current_turn:
            return []
        if self._status.is_terminal:
            return []
        return MoveGenerator(self._board).moves_from(
            sq, enforce_king_safety=self._config.enforce_king_safety
        )

    def is_in_check(self, color: Color) -> bool:
        return MoveGenerator(self._board).is_in_check(color)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _start(self, status: GameStatus) -> None:
        self.restore_state(
            board=Board.initial(),
            current_turn=Color.WHITE,
            status=status,
        )
        for cb in self.events.on_reset:
            cb()

    def _reject(self, error: MoveError, from_sq: Square, to_sq: Square) -> MoveOutcome:
        _LOGGER.debug("Move %s-%s rejected: %s", from_sq, to_sq, error.name)
        return MoveOutcome(error=error)

    def _emit_status(self, status: GameStatus) -> None:
        for cb in self.events.on_status_changed:
            cb(status)
