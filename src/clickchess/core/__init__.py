"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from clickchess.core import Board, MoveGenerator, parse_square

    gen = MoveGenerator(Board.initial())
    for sq in gen.piece_moves(parse_square("g1")):
        print(sq)
"""

from clickchess.core.board import Board
from clickchess.core.enums import Color, GameStatus, MoveError, PieceType
from clickchess.core.move_generator import MoveGenerator
from clickchess.core.notation import (
    STARTING_PLACEMENT,
    board_from_diagram,
    board_to_diagram,
    move_notation,
)
from clickchess.core.piece import Piece
from clickchess.core.rules import RuleConfig, Rules
from clickchess.core.types import Square, on_board, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "MoveError",
    "PieceType",
    # Types / helpers
    "Square",
    "on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
    "RuleConfig",
    "Rules",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_diagram",
    "board_to_diagram",
    "move_notation",
]
