"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from clickchess.core.enums import Color, PieceType
from clickchess.core.piece import Piece
from clickchess.core.types import ALL_SQUARES, BOARD_SIZE, Square

Grid = tuple[tuple[Piece | None, ...], ...]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 8x8 board, row 0 = black back rank.

    Every mutation helper returns a new :class:`Board`; a published board is
    never changed, so readers always see a consistent snapshot.
    """

    __slots__ = ("_grid",)

    def __init__(self, rows: Grid | None = None) -> None:
        if rows is None:
            rows = tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE))
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError("Board must be 8 rows of 8 squares")
        self._grid: Grid = tuple(tuple(row) for row in rows)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq.row][sq.col]

    def at(self, row: int, col: int) -> Piece | None:
        return self._grid[row][col]

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq.row][sq.col] is None

    @property
    def rows(self) -> Grid:
        return self._grid

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """All ``(square, piece)`` pairs, row-major order."""
        for sq in ALL_SQUARES:
            piece = self._grid[sq.row][sq.col]
            if piece is not None:
                yield sq, piece

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color and piece.piece_type == piece_type
        ]

    def king_square(self, color: Color) -> Square | None:
        """First king of *color* in row-major order, ``None`` if absent."""
        for sq, piece in self.occupied():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    def count(self) -> int:
        return sum(1 for _ in self.occupied())

    # -- Copy-on-write updates ----------------------------------------------

    def with_piece(self, sq: Square, piece: Piece | None) -> Board:
        """New board with *piece* placed on *sq* (``None`` clears it)."""
        rows = [list(row) for row in self._grid]
        rows[sq.row][sq.col] = piece
        return Board(tuple(tuple(row) for row in rows))

    def move(self, from_sq: Square, to_sq: Square) -> Board:
        """New board with the piece on *from_sq* lifted onto *to_sq*.

        Whatever stood on *to_sq* is dropped and the moved piece is flagged
        ``has_moved``.
        """
        piece = self[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")
        rows = [list(row) for row in self._grid]
        rows[from_sq.row][from_sq.col] = None
        rows[to_sq.row][to_sq.col] = piece.moved()
        return Board(tuple(tuple(row) for row in rows))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        rows: list[list[Piece | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for col, pt in enumerate(_BACK_RANK):
            rows[0][col] = Piece(Color.BLACK, pt)
            rows[1][col] = Piece(Color.BLACK, PieceType.PAWN)
            rows[6][col] = Piece(Color.WHITE, PieceType.PAWN)
            rows[7][col] = Piece(Color.WHITE, pt)
        return cls(tuple(tuple(row) for row in rows))

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __hash__(self) -> int:
        return hash(self._grid)

    def __repr__(self) -> str:
        lines: list[str] = []
        for row_idx, row in enumerate(self._grid):
            cells = [str(p) if p else "." for p in row]
            lines.append(f"{BOARD_SIZE - row_idx} {' '.join(cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
