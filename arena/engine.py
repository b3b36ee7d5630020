"""
TurnEngine - Main interface of the arena engine.

This is the API a presentation layer calls into. It ties the rules, the
commitment tracker and the resolver together behind one small surface and
enforces the only hard precondition: resolution happens exactly once both
sides have confirmed.

Usage:
    from arena import TurnEngine, Side, ActionType

    engine = TurnEngine()
    match = engine.new_match()

    engine.select_action(match, Side.A, ActionType.ATTACK)
    engine.confirm(match, Side.A)
    engine.select_action(match, Side.B, ActionType.MOVE)
    engine.pick_move_target(match, Side.B, (4, 0))
    engine.confirm(match, Side.B)

    if engine.both_confirmed(match):
        # A UI may pause here before showing results.
        match, logs, outcome = engine.resolve(match)

The engine is synchronous and performs no locking. Callers must serialize
calls that touch the same Match.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Tuple

from .config import MatchConfig
from .core.types import ActionType, ActionValidation, GridPos, MatchPhase, Side
from .core import validation as rules
from .errors import PreconditionError
from .mechanics.planning import CommitmentTracker
from .mechanics.resolution import ResolutionResult, TurnResolver
from .mechanics.victory import Outcome
from .world.grid import ARENA_GRID
from .world.match import Match
from infra.logger import get_logger

log = get_logger(__name__)


@dataclass
class Affordances:
    """
    Which planning controls are usable for a side right now.

    Mirrors the enabled/disabled state of the action buttons a UI shows.
    """
    move: bool = False
    attack: bool = False
    defend: bool = False
    reload: bool = False
    confirm: bool = False
    cancel: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)


class TurnEngine:
    """
    Turn engine facade.

    Owns no match state: every call takes the Match to act on, so the
    caller decides where the current state lives.
    """

    def __init__(self):
        # Stateless collaborators, safe to reuse across matches
        self._tracker = CommitmentTracker()
        self._resolver = TurnResolver()

    # ------------------------------------------------------------------#
    # Lifecycle
    # ------------------------------------------------------------------#
    def new_match(self, config: Optional[MatchConfig] = None) -> Match:
        """
        Create a match in its initial state.

        Args:
            config: Starting values (standard setup if None)

        Returns:
            Match at turn 1 with side A planning
        """
        match = Match.from_config(config)
        log.info("New match: %s vs %s", match.get(Side.A).name, match.get(Side.B).name)
        return match

    # ------------------------------------------------------------------#
    # Planning
    # ------------------------------------------------------------------#
    def select_action(self, match: Match, side: Side, kind: ActionType) -> ActionValidation:
        return self._tracker.select_action(match, side, kind)

    def pick_move_target(self, match: Match, side: Side, target: GridPos) -> ActionValidation:
        return self._tracker.pick_move_target(match, side, target)

    def confirm(self, match: Match, side: Side) -> bool:
        """Commit a side's plan; returns True once both sides are confirmed."""
        return self._tracker.confirm(match, side)

    def cancel(self, match: Match, side: Side) -> ActionValidation:
        return self._tracker.cancel(match, side)

    def both_confirmed(self, match: Match) -> bool:
        return match.both_confirmed

    # ------------------------------------------------------------------#
    # Resolution
    # ------------------------------------------------------------------#
    def resolve(self, match: Match) -> Tuple[Match, List[str], Outcome]:
        """
        Resolve the committed turn.

        Args:
            match: Match with both sides confirmed (not modified)

        Returns:
            Tuple of (next match state, log lines, outcome)

        Raises:
            PreconditionError: If the match is finished or a side has not confirmed
        """
        result = self.resolve_detailed(match)
        return result.match, result.logs, result.outcome

    def resolve_detailed(self, match: Match) -> ResolutionResult:
        """Same as resolve() but returns structured events as well."""
        if match.phase == MatchPhase.FINISHED:
            raise PreconditionError("Match is already finished")
        if not match.both_confirmed:
            pending = [c.label() for c in match.combatants if not c.confirmed]
            raise PreconditionError(f"Cannot resolve before both sides confirm (waiting on {', '.join(pending)})")
        return self._resolver.resolve(match)

    # ------------------------------------------------------------------#
    # Queries
    # ------------------------------------------------------------------#
    def is_valid_move(self, match: Match, side: Side, target: GridPos) -> bool:
        return rules.is_valid_move(match.get(side), match.opponent_of(side), target)

    def can_attack(self, match: Match, side: Side) -> bool:
        return rules.can_attack(match.get(side), match.opponent_of(side))

    def valid_moves(self, match: Match, side: Side) -> List[GridPos]:
        """Cells the side could move to from its current position, for highlighting."""
        mover = match.get(side)
        return [
            pos for pos in ARENA_GRID.get_neighbors(mover.pos)
            if rules.is_valid_move(mover, match.opponent_of(side), pos)
        ]

    def available_actions(self, match: Match, side: Side) -> Affordances:
        """
        Which planning controls would take effect for a side.

        Everything is disabled outside the side's own planning window.
        """
        combatant = match.get(side)
        planning = (
            match.phase == MatchPhase.PLANNING
            and match.active_side == side
            and not combatant.confirmed
        )
        if not planning:
            return Affordances()

        return Affordances(
            move=bool(self.valid_moves(match, side)),
            attack=rules.validate_resources(combatant, ActionType.ATTACK).valid,
            defend=rules.validate_resources(combatant, ActionType.DEFEND).valid,
            reload=rules.validate_resources(combatant, ActionType.RELOAD).valid,
            confirm=self._tracker.validate_confirm(match, side).valid,
            cancel=combatant.planned_action is not None or combatant.move_armed,
        )


# ============================================================================
# FUNCTIONAL API
# ============================================================================
# Thin wrappers over a shared engine instance for callers that prefer plain
# functions. The engine holds no match state, so sharing it is safe.

_default_engine = TurnEngine()


def new_match(config: Optional[MatchConfig] = None) -> Match:
    return _default_engine.new_match(config)


def select_action(match: Match, side: Side, kind: ActionType) -> ActionValidation:
    return _default_engine.select_action(match, side, kind)


def pick_move_target(match: Match, side: Side, target: GridPos) -> ActionValidation:
    return _default_engine.pick_move_target(match, side, target)


def confirm(match: Match, side: Side) -> bool:
    return _default_engine.confirm(match, side)


def cancel(match: Match, side: Side) -> ActionValidation:
    return _default_engine.cancel(match, side)


def both_confirmed(match: Match) -> bool:
    return _default_engine.both_confirmed(match)


def resolve(match: Match) -> Tuple[Match, List[str], Outcome]:
    return _default_engine.resolve(match)


def is_valid_move(match: Match, side: Side, target: GridPos) -> bool:
    return _default_engine.is_valid_move(match, side, target)


def can_attack(match: Match, side: Side) -> bool:
    return _default_engine.can_attack(match, side)
