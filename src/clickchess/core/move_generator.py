"""Pseudo-legal move generation, king-safety filtering and check detection.

The generator is turn-independent: the moving color is always read from the
piece on the origin square, so it can be used for threat analysis without
touching whose turn it is.
"""

from __future__ import annotations

from clickchess.core.board import Board
from clickchess.core.enums import Color, PieceType
from clickchess.core.types import ALL_SQUARES, Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        moves: list[Square] = []
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if to_sq is not None:
                moves.append(to_sq)
        targets[sq] = tuple(moves)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for d_row, d_col in directions:
            ray: list[Square] = []
            to_sq = sq.offset(d_row, d_col)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(d_row, d_col)
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_SLIDER_RAYS: dict[PieceType, dict[Square, tuple[tuple[Square, ...], ...]]] = {
    PieceType.BISHOP: _BISHOP_RAYS,
    PieceType.ROOK: _ROOK_RAYS,
    PieceType.QUEEN: _QUEEN_RAYS,
}


class MoveGenerator:
    """Generates moves for the pieces on a :class:`Board`.

    Boards are immutable, so king-safety checks simulate moves on scratch
    copies and the generator never needs restoring.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def piece_moves(self, sq: Square) -> list[Square]:
        """Pseudo-legal destinations of the piece on *sq* (may expose its king)."""
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[Square] = []
        color = piece.color
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, color, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(sq, color, _KNIGHT_TARGETS[sq], moves)
        elif ptype == PieceType.KING:
            self._gen_steps(sq, color, _KING_TARGETS[sq], moves)
        else:
            self._gen_sliding(sq, color, _SLIDER_RAYS[ptype][sq], moves)
        return moves

    def legal_piece_moves(self, sq: Square) -> list[Square]:
        """Destinations that do not leave the mover's own king in check."""
        piece = self._board[sq]
        if piece is None:
            return []
        legal: list[Square] = []
        for to_sq in self.piece_moves(sq):
            after = MoveGenerator(self._board.move(sq, to_sq))
            if not after.is_in_check(piece.color):
                legal.append(to_sq)
        return legal

    def moves_from(self, sq: Square, *, enforce_king_safety: bool = False) -> list[Square]:
        if enforce_king_safety:
            return self.legal_piece_moves(sq)
        return self.piece_moves(sq)

    def has_any_move(self, color: Color, *, enforce_king_safety: bool = False) -> bool:
        """Whether any piece of *color* has at least one move anywhere on the board."""
        for sq in self._board.all_pieces(color):
            if self.moves_from(sq, enforce_king_safety=enforce_king_safety):
                return True
        return False

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king among the destinations of any enemy piece?

        A missing king is not an error; it simply cannot be in check.
        """
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, target: Square, by_color: Color) -> bool:
        """Is *target* a pseudo-legal destination of any *by_color* piece?

        Pawn pushes never reach an occupied square, so for occupied targets
        this is exactly the classic attack test.
        """
        for sq in self._board.all_pieces(by_color):
            if target in self.piece_moves(sq):
                return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Square]) -> None:
        board = self._board
        step = color.forward

        one_step = sq.offset(step, 0)
        if one_step is not None and board.is_empty(one_step):
            moves.append(one_step)
            if sq.row == color.pawn_row:
                two_step = sq.offset(2 * step, 0)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(two_step)

        for d_col in (-1, 1):
            cap_sq = sq.offset(step, d_col)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                moves.append(cap_sq)

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break
