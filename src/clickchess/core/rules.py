"""High-level chess rules: check, checkmate, stalemate, draw detection."""

from __future__ import annotations

from dataclasses import dataclass

from clickchess.core.board import Board
from clickchess.core.enums import Color, GameStatus, PieceType
from clickchess.core.move_generator import MoveGenerator


@dataclass(frozen=True, slots=True)
class RuleConfig:
    """Which rule refinements an engine applies.

    Args:
        enforce_king_safety: Filter out moves that leave the mover's own king
            in check. Off by default: moves are pseudo-legal.
        detect_stalemate: Report ``STALEMATE`` when the side to move is not in
            check and has no move.
        detect_insufficient_material: Report ``DRAW`` for K v K, K+minor v K
            and K+B v K+B with same-coloured bishops.
    """

    enforce_king_safety: bool = False
    detect_stalemate: bool = True
    detect_insufficient_material: bool = True


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def has_any_move(board: Board, color: Color, config: RuleConfig = RuleConfig()) -> bool:
        return MoveGenerator(board).has_any_move(
            color, enforce_king_safety=config.enforce_king_safety
        )

    @staticmethod
    def is_checkmate(board: Board, color: Color, config: RuleConfig = RuleConfig()) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_any_move(board, color, config)

    @staticmethod
    def is_stalemate(board: Board, color: Color, config: RuleConfig = RuleConfig()) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_any_move(board, color, config)

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops)."""
        others = [
            (sq, piece)
            for sq, piece in board.occupied()
            if piece.piece_type != PieceType.KING
        ]

        # K vs K
        if not others:
            return True

        # K+minor vs K
        if len(others) == 1:
            return others[0][1].piece_type in (PieceType.KNIGHT, PieceType.BISHOP)

        # K+B vs K+B with same-colour bishops
        if len(others) == 2:
            (sq_a, a), (sq_b, b) = others
            if (
                a.piece_type == PieceType.BISHOP
                and b.piece_type == PieceType.BISHOP
                and a.color != b.color
            ):
                return (sq_a.row + sq_a.col) % 2 == (sq_b.row + sq_b.col) % 2

        return False

    @staticmethod
    def status_after_move(
        board: Board, side_to_move: Color, config: RuleConfig = RuleConfig()
    ) -> GameStatus:
        """Status of the game once *side_to_move* is about to play on *board*."""
        gen = MoveGenerator(board)
        safe = config.enforce_king_safety

        if gen.is_in_check(side_to_move):
            if gen.has_any_move(side_to_move, enforce_king_safety=safe):
                return GameStatus.CHECK
            return GameStatus.CHECKMATE

        if config.detect_stalemate and not gen.has_any_move(
            side_to_move, enforce_king_safety=safe
        ):
            return GameStatus.STALEMATE

        if config.detect_insufficient_material and Rules.is_insufficient_material(board):
            return GameStatus.DRAW

        return GameStatus.PLAYING
