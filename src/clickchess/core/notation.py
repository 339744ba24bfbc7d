"""Board diagrams (FEN piece placement) and move-record notation."""

from __future__ import annotations

from clickchess.core.board import Board
from clickchess.core.piece import Piece
from clickchess.core.types import BOARD_SIZE, Square, square_name

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_diagram(diagram: str) -> Board:
    """Parse the piece-placement field of a FEN string into a :class:`Board`.

    Ranks are listed from rank 8 (row 0) down to rank 1 (row 7). Any fields
    after the first whitespace are ignored.
    """
    fields = diagram.split()
    if not fields:
        raise ValueError("Empty board diagram")
    ranks = fields[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid diagram (must contain 8 ranks): {diagram!r}")

    rows: list[tuple[Piece | None, ...]] = []
    for rank_text in ranks:
        row: list[Piece | None] = []
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid diagram digit {ch!r}: {diagram!r}")
                row.extend([None] * step)
            else:
                row.append(Piece.from_char(ch))
            if len(row) > BOARD_SIZE:
                raise ValueError(f"Invalid diagram rank width: {diagram!r}")
        if len(row) != BOARD_SIZE:
            raise ValueError(f"Invalid diagram rank width: {diagram!r}")
        rows.append(tuple(row))
    return Board(tuple(rows))


def board_to_diagram(board: Board) -> str:
    """Serialise *board* to a FEN piece-placement field."""
    ranks: list[str] = []
    for row in board.rows:
        empty = 0
        text = ""
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)
    return "/".join(ranks)


def move_notation(piece: Piece, from_sq: Square, to_sq: Square) -> str:
    """History record for a move, e.g. ``Nb1-a3``."""
    return f"{piece.piece_type.letter}{square_name(from_sq)}-{square_name(to_sq)}"
