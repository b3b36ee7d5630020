"""
Core type definitions for the Tactical Arena engine.

This module contains all fundamental types, enums, and constants used
throughout the system. No logic, just pure data structures.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Tuple
from dataclasses import dataclass

# ============================================================================
# SPATIAL TYPES
# ============================================================================

# Grid position: (x, y) where:
# - X increases to the RIGHT (columns 0..5)
# - Y increases DOWNWARD (rows 0..2, row 0 is the top lane)
# - Origin (0, 0) is at TOP-LEFT
GridPos = Tuple[int, int]

ARENA_WIDTH = 6
ARENA_HEIGHT = 3

# Last column of the left zone; the right zone starts at ZONE_SPLIT_X + 1.
ZONE_SPLIT_X = 2

# Ammo gained per reload, before capping at max ammo.
RELOAD_AMOUNT = 2


class Side(Enum):
    """The two fixed combatant sides of a match."""
    A = "A"
    B = "B"

    def __str__(self) -> str:
        return self.value

    @property
    def opponent(self) -> Side:
        """Get the opposing side."""
        return Side.B if self == Side.A else Side.A


# ============================================================================
# ACTIONS
# ============================================================================

class ActionType(Enum):
    """Kinds of action a combatant can plan for a turn."""
    MOVE = auto()  # Step to an adjacent cell in own zone
    ATTACK = auto()  # Fire down the current row
    DEFEND = auto()  # Raise a shield for this turn
    RELOAD = auto()  # Regain ammunition

    def __str__(self) -> str:
        return self.name


# ============================================================================
# MATCH PHASE
# ============================================================================

class MatchPhase(Enum):
    """
    Commitment state of a match.

    PLANNING: exactly one side (Match.active_side) may plan and confirm.
    BOTH_COMMITTED: both sides confirmed, waiting for the caller to resolve.
    FINISHED: a side won; no further planning or resolution.
    """
    PLANNING = "planning"
    BOTH_COMMITTED = "both_committed"
    FINISHED = "finished"

    def __str__(self) -> str:
        return self.value


# ============================================================================
# GAME RESULT
# ============================================================================

class GameResult(Enum):
    """Possible match outcomes."""
    IN_PROGRESS = "in_progress"
    A_WINS = "a_wins"
    B_WINS = "b_wins"

    def __str__(self) -> str:
        return self.value.replace("_", " ").title()

    @staticmethod
    def win_for(side: Side) -> GameResult:
        """Get the result value for a win by the given side."""
        return GameResult.A_WINS if side == Side.A else GameResult.B_WINS


# ============================================================================
# ACTION VALIDATION
# ============================================================================

@dataclass
class ActionValidation:
    """
    Structured result of validating a planning call.

    Planning calls never raise for illegal input. They return one of these
    so callers can tell an applied effect from a documented no-op.

    Attributes:
        valid: Whether the call was applied
        error_code: Machine-readable error code (None if valid)
        message: Human-readable message explaining the result

    Error codes:
        - "NOT_PLANNING": Match is not in the planning phase
        - "NOT_ACTIVE_SIDE": Side is not the one currently planning
        - "ALREADY_CONFIRMED": Side already committed its action
        - "NO_AMMO": Attack requires ammo > 0
        - "NO_SHIELDS": Defend requires shields > 0
        - "AMMO_FULL": Reload requires ammo < max ammo
        - "MOVE_NOT_ARMED": Move target picked without selecting Move first
        - "OUT_OF_BOUNDS": Target cell is outside the arena
        - "OUT_OF_ZONE": Target cell is in the opponent's half
        - "OCCUPIED": Target cell holds the opponent
        - "NOT_ADJACENT": Target cell is not exactly one step away
        - "NO_PLANNED_ACTION": Confirm without a planned action
    """
    valid: bool
    error_code: str | None = None
    message: str = ""

    @staticmethod
    def success(message: str = "") -> ActionValidation:
        """Create a validation success result."""
        return ActionValidation(valid=True, error_code=None, message=message)

    @staticmethod
    def fail(error_code: str, message: str) -> ActionValidation:
        """Create a validation failure result."""
        return ActionValidation(valid=False, error_code=error_code, message=message)
