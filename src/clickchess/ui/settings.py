"""User-configurable settings for the desktop front end."""

from __future__ import annotations

from dataclasses import dataclass, field

from clickchess.core.rules import RuleConfig
from clickchess.game.store import DEFAULT_SESSION_KEY


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    show_coordinates: bool = True
    show_valid_moves: bool = True
    highlight_last_move: bool = True

    # Session
    confirm_reset: bool = True
    autosave: bool = True
    session_key: str = DEFAULT_SESSION_KEY

    # Rules applied to new engines
    rules: RuleConfig = field(default_factory=RuleConfig)
