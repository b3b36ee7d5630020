"""
Tactical Arena - two-player simultaneous-commitment turn engine.

Instead of from arena.engine import TurnEngine, you can do: from arena import TurnEngine
"""

from .core.types import ActionType, ActionValidation, GameResult, GridPos, MatchPhase, Side
from .core.actions import Action
from .config import MatchConfig
from .entities import Combatant
from .errors import ArenaError, ConfigError, PreconditionError
from .mechanics import EventKind, Outcome, ResolutionResult, TurnEvent
from .world import Grid, Match
from .engine import (
    Affordances,
    TurnEngine,
    new_match,
    select_action,
    pick_move_target,
    confirm,
    cancel,
    both_confirmed,
    resolve,
    is_valid_move,
    can_attack,
)

__all__ = [
    "Action",
    "ActionType",
    "ActionValidation",
    "Affordances",
    "ArenaError",
    "Combatant",
    "ConfigError",
    "EventKind",
    "GameResult",
    "Grid",
    "GridPos",
    "Match",
    "MatchConfig",
    "MatchPhase",
    "Outcome",
    "PreconditionError",
    "ResolutionResult",
    "Side",
    "TurnEngine",
    "TurnEvent",
    "new_match",
    "select_action",
    "pick_move_target",
    "confirm",
    "cancel",
    "both_confirmed",
    "resolve",
    "is_valid_move",
    "can_attack",
]
