"""
Mechanics module - Planning and resolution systems.

This module provides stateless systems operating on a Match:
- CommitmentTracker: Planning, confirmation and cancellation
- TurnResolver: Four-phase resolution of committed actions
- VictoryConditions: End-of-match check

None of them keep state of their own between calls.
"""

from .planning import CommitmentTracker
from .resolution import TurnResolver, ResolutionResult, TurnEvent, EventKind
from .victory import VictoryConditions, Outcome

__all__ = [
    "CommitmentTracker",
    "TurnResolver",
    "ResolutionResult",
    "TurnEvent",
    "EventKind",
    "VictoryConditions",
    "Outcome",
]
