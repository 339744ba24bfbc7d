"""User-facing strings for status banners and panels."""

from __future__ import annotations

from clickchess.core.enums import Color, GameStatus, PieceType

INFO = "info"
WARNING = "warning"
SUCCESS = "success"

RESET_DONE = "Game has been reset"
RESET_TITLE = "Reset game"
RESET_CONFIRM = "Are you sure you want to reset the game?"
RESTORED = "Previous game restored"
NO_MOVES = "No moves yet"
NONE_CAPTURED = "None"

# Filled glyphs regardless of side, as in the captured-pieces panel.
_CAPTURE_GLYPHS: dict[PieceType, str] = {
    PieceType.PAWN: "♟",
    PieceType.ROOK: "♜",
    PieceType.KNIGHT: "♞",
    PieceType.BISHOP: "♝",
    PieceType.QUEEN: "♛",
    PieceType.KING: "♚",
}


def color_name(color: Color) -> str:
    return str(color).capitalize()


def status_name(status: GameStatus) -> str:
    return str(status).capitalize()


def turn_label(color: Color) -> str:
    return f"{color_name(color)}'s Turn"


def capture_glyph(piece_type: PieceType) -> str:
    return _CAPTURE_GLYPHS[piece_type]


def status_banner(status: GameStatus, side_to_move: Color) -> tuple[str, str] | None:
    """Notification ``(kind, text)`` announcing *status*, if it deserves one."""
    if status == GameStatus.CHECK:
        return WARNING, f"{color_name(side_to_move)} is in check!"
    if status == GameStatus.CHECKMATE:
        return SUCCESS, f"Checkmate! {color_name(side_to_move.opposite)} wins!"
    if status == GameStatus.STALEMATE:
        return INFO, "Stalemate! The game is a draw."
    if status == GameStatus.DRAW:
        return INFO, "Draw by insufficient material."
    return None


def numbered_history(history: tuple[str, ...] | list[str]) -> list[str]:
    """Move list lines, white moves prefixed with the move number."""
    lines: list[str] = []
    for ply, record in enumerate(history):
        if ply % 2 == 0:
            lines.append(f"{ply // 2 + 1}. {record}")
        else:
            lines.append(record)
    return lines
