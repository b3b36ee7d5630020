from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from arena import Action, Match, Outcome, Side, TurnEvent


@dataclass
class Frame:
    """
    UI-friendly snapshot of one resolved turn.

    Attributes:
        turn: Turn number that was resolved
        actions: Committed action per side (None for a side that passed)
        events: Turn events in execution order
        outcome: Whether the match continues or a side won
        match: Match state after resolution
    """
    turn: int
    actions: Dict[Side, Optional[Action]]
    events: List[TurnEvent]
    outcome: Outcome
    match: Match

    @property
    def logs(self) -> List[str]:
        return [event.message for event in self.events]

    @property
    def done(self) -> bool:
        return self.outcome.is_game_over

    def to_dict(self) -> Dict[str, Any]:
        return {
            "turn": self.turn,
            "actions": {
                side.name: action.to_dict() if action else None
                for side, action in self.actions.items()
            },
            "events": [event.to_dict() for event in self.events],
            "logs": self.logs,
            "outcome": self.outcome.to_dict(),
            "done": self.done,
            "match": self.match.to_dict(),
        }
