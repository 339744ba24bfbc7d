"""Game management layer — engine state machine, snapshots, stores.

Quick start::

    from clickchess.core import parse_square
    from clickchess.game import ChessEngine

    engine = ChessEngine()
    engine.initialize()
    engine.select_square(parse_square("g1"))
    engine.select_square(parse_square("f3"))
    print(engine.move_history)   # ('Ng1-f3',)
"""

from clickchess.game.engine import (
    CapturedPieces,
    ChessEngine,
    GameEvents,
    LastMove,
    MoveOutcome,
)
from clickchess.game.snapshot import (
    SnapshotError,
    engine_from_dict,
    engine_to_dict,
    restore_engine,
)
from clickchess.game.store import DEFAULT_SESSION_KEY, MemoryStore, SnapshotStore

__all__ = [
    # Engine
    "CapturedPieces",
    "ChessEngine",
    "GameEvents",
    "LastMove",
    "MoveOutcome",
    # Snapshots
    "SnapshotError",
    "engine_from_dict",
    "engine_to_dict",
    "restore_engine",
    # Stores
    "DEFAULT_SESSION_KEY",
    "MemoryStore",
    "SnapshotStore",
]
