"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step: white moves toward row 0."""
        return -1 if self == Color.WHITE else 1

    @property
    def pawn_row(self) -> int:
        """Starting row of this side's pawns."""
        return 6 if self == Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Uppercase letter used in move records (knight is ``N``)."""
        return _LETTERS[self]

    def __str__(self) -> str:
        return self.name.lower()


_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


class GameStatus(IntEnum):
    """Single authoritative status of a game session."""

    WAITING = 0
    PLAYING = 1
    CHECK = 2
    CHECKMATE = 3
    STALEMATE = 4
    DRAW = 5

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE, GameStatus.DRAW)

    def __str__(self) -> str:
        return self.name.lower()


class MoveError(IntEnum):
    """Why a move request was rejected."""

    NO_PIECE_AT_SOURCE = 1
    WRONG_TURN = 2
    ILLEGAL_DESTINATION = 3
    GAME_OVER = 4
