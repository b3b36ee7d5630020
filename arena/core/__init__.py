"""
Core types and constants for the Tactical Arena engine.
"""

# Instead of from arena.core.types import Side, you can do: from arena.core import Side
from .types import (
    GridPos,
    Side,
    ActionType,
    MatchPhase,
    GameResult,
    ActionValidation,
    ARENA_WIDTH,
    ARENA_HEIGHT,
    ZONE_SPLIT_X,
    RELOAD_AMOUNT,
)


__all__ = [
    "GridPos",
    "Side",
    "ActionType",
    "MatchPhase",
    "GameResult",
    "ActionValidation",
    "ARENA_WIDTH",
    "ARENA_HEIGHT",
    "ZONE_SPLIT_X",
    "RELOAD_AMOUNT",
]
