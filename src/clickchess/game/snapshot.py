"""Plain-data snapshots of a :class:`ChessEngine`.

The snapshot is a JSON-compatible dict (nested lists, strings, bools, ints)
with no cyclic references, so any key-value store can persist it.
"""

from __future__ import annotations

from typing import Any

from clickchess.core.board import Board
from clickchess.core.enums import Color, GameStatus, PieceType
from clickchess.core.piece import Piece
from clickchess.core.rules import RuleConfig
from clickchess.core.types import BOARD_SIZE, Square
from clickchess.game.engine import CapturedPieces, ChessEngine, LastMove

SNAPSHOT_VERSION = 1


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be decoded."""


# ── Encoding ─────────────────────────────────────────────────────────────────


def _piece_to_dict(piece: Piece) -> dict[str, Any]:
    return {
        "type": str(piece.piece_type),
        "color": str(piece.color),
        "has_moved": piece.has_moved,
    }


def _square_to_dict(sq: Square | None) -> dict[str, int] | None:
    if sq is None:
        return None
    return {"row": sq.row, "col": sq.col}


def engine_to_dict(engine: ChessEngine) -> dict[str, Any]:
    """Serialise the full engine state."""
    last = engine.last_move
    return {
        "version": SNAPSHOT_VERSION,
        "board": [
            [None if p is None else _piece_to_dict(p) for p in row]
            for row in engine.board.rows
        ],
        "current_turn": str(engine.current_turn),
        "selected": _square_to_dict(engine.selected),
        "status": str(engine.status),
        "move_history": list(engine.move_history),
        "captured": {
            "white": [_piece_to_dict(p) for p in engine.captured.white],
            "black": [_piece_to_dict(p) for p in engine.captured.black],
        },
        "last_move": None
        if last is None
        else {
            "from": _square_to_dict(last.from_sq),
            "to": _square_to_dict(last.to_sq),
        },
    }


# ── Decoding ─────────────────────────────────────────────────────────────────


def _enum_by_name(enum_cls: Any, value: Any, what: str) -> Any:
    if not isinstance(value, str):
        raise SnapshotError(f"Invalid {what}: {value!r}")
    try:
        return enum_cls[value.upper()]
    except KeyError:
        raise SnapshotError(f"Invalid {what}: {value!r}") from None


def _bool_field(data: dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise SnapshotError(f"Invalid {key}: {value!r}")
    return value


def _piece_from_dict(data: Any) -> Piece:
    if not isinstance(data, dict):
        raise SnapshotError(f"Invalid piece: {data!r}")
    return Piece(
        color=_enum_by_name(Color, data.get("color"), "piece color"),
        piece_type=_enum_by_name(PieceType, data.get("type"), "piece type"),
        has_moved=_bool_field(data, "has_moved"),
    )


def _pieces_from_list(data: Any, what: str) -> tuple[Piece, ...]:
    if not isinstance(data, list):
        raise SnapshotError(f"Invalid {what}: {data!r}")
    return tuple(_piece_from_dict(p) for p in data)


def _square_from_dict(data: Any) -> Square | None:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise SnapshotError(f"Invalid square: {data!r}")
    row, col = data.get("row"), data.get("col")
    # bool is an int subclass but never a coordinate
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in (row, col)):
        raise SnapshotError(f"Invalid square: {data!r}")
    try:
        return Square(row, col)
    except ValueError as exc:
        raise SnapshotError(f"Invalid square: {data!r}") from exc


def _board_from_list(data: Any) -> Board:
    if not isinstance(data, list) or len(data) != BOARD_SIZE:
        raise SnapshotError("Snapshot board must have 8 rows")
    rows: list[tuple[Piece | None, ...]] = []
    for row in data:
        if not isinstance(row, list) or len(row) != BOARD_SIZE:
            raise SnapshotError("Snapshot board rows must have 8 squares")
        rows.append(tuple(None if cell is None else _piece_from_dict(cell) for cell in row))
    return Board(tuple(rows))


def engine_from_dict(data: Any, config: RuleConfig | None = None) -> ChessEngine:
    """Build a new engine from :func:`engine_to_dict` output."""
    engine = ChessEngine(config)
    restore_engine(engine, data)
    return engine


def restore_engine(engine: ChessEngine, data: Any) -> None:
    """Replace *engine*'s state with the snapshot *data*."""
    if not isinstance(data, dict):
        raise SnapshotError("Snapshot must be a mapping")
    version = data.get("version")
    if version != SNAPSHOT_VERSION:
        raise SnapshotError(f"Unsupported snapshot version: {version!r}")

    history = data.get("move_history", [])
    if not isinstance(history, list) or not all(isinstance(m, str) for m in history):
        raise SnapshotError("Snapshot move history must be a list of strings")

    captured_data = data.get("captured", {})
    if not isinstance(captured_data, dict):
        raise SnapshotError("Snapshot captures must be a mapping")
    captured = CapturedPieces(
        white=_pieces_from_list(captured_data.get("white", []), "white captures"),
        black=_pieces_from_list(captured_data.get("black", []), "black captures"),
    )

    last_data = data.get("last_move")
    last_move: LastMove | None = None
    if last_data is not None:
        if not isinstance(last_data, dict):
            raise SnapshotError(f"Invalid last move: {last_data!r}")
        from_sq = _square_from_dict(last_data.get("from"))
        to_sq = _square_from_dict(last_data.get("to"))
        if from_sq is None or to_sq is None:
            raise SnapshotError(f"Invalid last move: {last_data!r}")
        last_move = LastMove(from_sq, to_sq)

    engine.restore_state(
        board=_board_from_list(data.get("board")),
        current_turn=_enum_by_name(Color, data.get("current_turn"), "turn"),
        status=_enum_by_name(GameStatus, data.get("status"), "status"),
        move_history=history,
        captured=captured,
        last_move=last_move,
        selected=_square_from_dict(data.get("selected")),
    )
