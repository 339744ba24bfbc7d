"""Square value type and coordinate helpers.

Board layout (row-major, as displayed):
    row 0 = rank 8 (black back rank), row 7 = rank 1 (white back rank)
    col 0 = file a, col 7 = file h
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


def on_board(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """A board coordinate. Only ever constructed in range."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not on_board(self.row, self.col):
            raise ValueError(f"Square out of range: ({self.row}, {self.col})")

    def offset(self, d_row: int, d_col: int) -> Square | None:
        """Neighbouring square, or ``None`` when it falls off the board."""
        row, col = self.row + d_row, self.col + d_col
        if not on_board(row, col):
            return None
        return Square(row, col)

    @property
    def name(self) -> str:
        return square_name(self)

    def __str__(self) -> str:
        return square_name(self)


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. (7, 1) -> 'b1', (0, 0) -> 'a8'."""
    return chr(ord("a") + sq.col) + str(BOARD_SIZE - sq.row)


def parse_square(name: str) -> Square:
    """Parse an algebraic name, e.g. 'e4' -> Square(4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))
