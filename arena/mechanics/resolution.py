"""
TurnResolver - Deterministic resolution of both committed actions.

One resolution pass runs four phases, each processing side A then side B:

1. Movement: MOVE actions relocate their combatant
2. Reload: RELOAD actions regain up to RELOAD_AMOUNT ammo, capped at max ammo
3. Defend: DEFEND actions raise a shield (logged only; applied in phase 4)
4. Attack: ATTACK actions fire down the attacker's row using post-movement
   positions. Damage applies sequentially, so A's shot lands before B's
   shot is evaluated.

Then settlement clears both plans, checks for a winner and either finishes
the match or opens planning for the next turn.

The resolver never rejects input. A side without a planned action simply
passes (no effect, no log line). The input Match is never modified: the
pass runs on a clone which is returned in the ResolutionResult.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..core.types import ActionType, MatchPhase, RELOAD_AMOUNT, Side
from ..core.validation import can_attack
from .planning import CommitmentTracker
from .victory import Outcome, VictoryConditions
from infra.logger import get_logger

if TYPE_CHECKING:
    from ..world.match import Match
    from ..entities.combatant import Combatant

log = get_logger(__name__)


class EventKind(Enum):
    """Distinct things that can happen during a resolution pass."""
    MOVED = "moved"
    RELOADED = "reloaded"
    SHIELD_RAISED = "shield_raised"
    HIT = "hit"
    BLOCKED = "blocked"
    MISSED = "missed"  # fired into the void
    NO_AMMO = "no_ammo"
    VICTORY = "victory"

    def __str__(self) -> str:
        return self.value


@dataclass
class TurnEvent:
    """
    One entry of the turn log.

    Attributes:
        kind: What happened
        side: Acting side (the winner for VICTORY)
        message: Human-readable log line
        details: Event-specific values (new position, ammo gained, ...)
    """
    kind: EventKind
    side: Side
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to a plain dict."""
        return {
            "kind": self.kind.name,
            "side": self.side.name,
            "message": self.message,
            "details": self.details,
        }


@dataclass
class ResolutionResult:
    """
    Complete result of one resolution pass.

    Attributes:
        match: New match state (the input match is left untouched)
        events: Turn events in execution order
        outcome: Whether the match continues or a side won
    """
    match: Match
    events: List[TurnEvent]
    outcome: Outcome

    @property
    def logs(self) -> List[str]:
        """Plain log lines in execution order."""
        return [event.message for event in self.events]

    def events_of(self, kind: EventKind) -> List[TurnEvent]:
        return [event for event in self.events if event.kind == kind]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the resolution result to a dict."""
        return {
            "match": self.match.to_dict(),
            "events": [e.to_dict() for e in self.events],
            "logs": self.logs,
            "outcome": self.outcome.to_dict(),
        }


class TurnResolver:
    """
    Stateless resolver for a full turn.

    Usage:
        result = TurnResolver().resolve(match)
        for line in result.logs:
            print(line)
        if result.outcome.is_game_over:
            print(f"Winner: {result.outcome.winner}")
    """

    def __init__(self):
        self._tracker = CommitmentTracker()
        self._victory = VictoryConditions()

    def resolve(self, match: Match) -> ResolutionResult:
        """
        Run one resolution pass over both sides' planned actions.

        Args:
            match: Current match (not modified)

        Returns:
            ResolutionResult with the next match state, events and outcome
        """
        state = match.clone()
        plans: Dict[Side, Optional[ActionType]] = {
            c.side: c.planned_action.type if c.planned_action else None
            for c in state.combatants
        }
        events: List[TurnEvent] = []

        events.extend(self._movement_phase(state))
        events.extend(self._reload_phase(state, plans))
        events.extend(self._defend_phase(state, plans))
        events.extend(self._attack_phase(state, plans))

        outcome = self._settle(state)
        if outcome.is_game_over:
            winner = state.get(outcome.winner)
            events.append(TurnEvent(EventKind.VICTORY, winner.side, f"🏆 {winner.name} wins!"))

        log.info(
            "Turn %d resolved: %d events, %s",
            match.turn, len(events), outcome,
        )
        return ResolutionResult(match=state, events=events, outcome=outcome)

    # ========================================================================
    # PHASES
    # ========================================================================

    def _movement_phase(self, state: Match) -> List[TurnEvent]:
        events = []
        for combatant in state.combatants:
            action = combatant.planned_action
            if action is None or action.type != ActionType.MOVE:
                continue
            old_pos = combatant.pos
            combatant.pos = action.target
            x, y = combatant.pos
            events.append(TurnEvent(
                EventKind.MOVED,
                combatant.side,
                f"{combatant.name} moved to ({x + 1}, {y + 1})",
                {"from": list(old_pos), "to": [x, y]},
            ))
        return events

    def _reload_phase(self, state: Match, plans: Dict[Side, Optional[ActionType]]) -> List[TurnEvent]:
        events = []
        for combatant in state.combatants:
            if plans[combatant.side] != ActionType.RELOAD:
                continue
            amount = max(0, min(RELOAD_AMOUNT, combatant.max_ammo - combatant.ammo))
            combatant.ammo += amount
            events.append(TurnEvent(
                EventKind.RELOADED,
                combatant.side,
                f"{combatant.name} reloaded (+{amount} ammo)",
                {"amount": amount, "ammo": combatant.ammo},
            ))
        return events

    def _defend_phase(self, state: Match, plans: Dict[Side, Optional[ActionType]]) -> List[TurnEvent]:
        return [
            TurnEvent(EventKind.SHIELD_RAISED, c.side, f"{c.name} raised a shield", {"shields": c.shields})
            for c in state.combatants
            if plans[c.side] == ActionType.DEFEND
        ]

    def _attack_phase(self, state: Match, plans: Dict[Side, Optional[ActionType]]) -> List[TurnEvent]:
        events = []
        for attacker in state.combatants:
            if plans[attacker.side] != ActionType.ATTACK:
                continue
            defender = state.opponent_of(attacker.side)
            events.append(self._resolve_attack(attacker, defender, plans[defender.side] == ActionType.DEFEND))
        return events

    def _resolve_attack(self, attacker: Combatant, defender: Combatant, defending: bool) -> TurnEvent:
        """
        Resolve a single shot.

        Args:
            attacker: Combatant firing (modified in-place)
            defender: Opponent (modified in-place)
            defending: Whether the defender committed DEFEND this turn

        Returns:
            The event describing the shot
        """
        if can_attack(attacker, defender):
            attacker.ammo -= 1
            if defending and defender.shields > 0:
                defender.shields -= 1
                return TurnEvent(
                    EventKind.BLOCKED,
                    attacker.side,
                    f"{attacker.name} attacked but {defender.name} blocked with a shield",
                    {"target": defender.side.name, "shields_left": defender.shields},
                )
            defender.health = max(0, defender.health - 1)
            return TurnEvent(
                EventKind.HIT,
                attacker.side,
                f"{attacker.name} hit {defender.name}! damage: 1",
                {"target": defender.side.name, "damage": 1, "health_left": defender.health},
            )

        if attacker.ammo <= 0:
            return TurnEvent(
                EventKind.NO_AMMO,
                attacker.side,
                f"{attacker.name} tried to attack but has no ammo",
            )

        # A wasted shot still spends a round
        attacker.ammo -= 1
        return TurnEvent(
            EventKind.MISSED,
            attacker.side,
            f"{attacker.name} fired into the void - target not in line of fire",
            {"ammo_left": attacker.ammo},
        )

    # ========================================================================
    # SETTLEMENT
    # ========================================================================

    def _settle(self, state: Match) -> Outcome:
        """Clear commitments, then either finish the match or open the next turn."""
        for combatant in state.combatants:
            combatant.clear_plan()

        outcome = self._victory.check(state)
        if outcome.is_game_over:
            state.phase = MatchPhase.FINISHED
            state.active_side = None
            state.result = outcome.result
            state.winner = outcome.winner
            log.info("Match finished on turn %d: %s", state.turn, outcome)
            return outcome

        state.turn += 1
        self._tracker.start_turn(state)
        return outcome
