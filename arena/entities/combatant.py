"""
Combatant entity - one of the two fighters in the arena.

A combatant:
- Occupies one cell in its own half of the board
- Has health, shields and ammo
- Holds at most one planned action per turn, plus a confirmation flag
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.types import Side, GridPos
from ..core.actions import Action


@dataclass
class Combatant:
    """
    Mutable combatant state owned by a Match.

    Only the commitment tracker (planning fields) and the resolver
    (everything else) write to these fields.

    Attributes:
        side: Fixed side for the match
        name: Display name used in turn logs
        health: Remaining health, the combatant is defeated at <= 0
        shields: Shield charges, each absorbs one hit while defending
        ammo: Rounds available, 0 <= ammo <= max_ammo
        max_ammo: Ammo cap for reloads
        pos: Current cell
        planned_action: Action planned this turn, None when nothing is planned
        confirmed: Whether the planned action is committed
        move_armed: Move was selected and a target cell pick is pending
    """

    side: Side
    name: str
    health: int
    shields: int
    ammo: int
    max_ammo: int
    pos: GridPos
    planned_action: Optional[Action] = None
    confirmed: bool = False
    move_armed: bool = False

    def __post_init__(self):
        """Validate resource bounds."""
        self.pos = tuple(self.pos)
        if self.shields < 0:
            raise ValueError(f"Shields cannot be negative: {self.shields}")
        if self.max_ammo < 0:
            raise ValueError(f"Max ammo cannot be negative: {self.max_ammo}")
        if not 0 <= self.ammo <= self.max_ammo:
            raise ValueError(f"Ammo must be within 0..{self.max_ammo}: {self.ammo}")

    @property
    def alive(self) -> bool:
        return self.health > 0

    def label(self) -> str:
        return f"{self.name}[{self.side}]"

    def clear_plan(self) -> None:
        """Drop the planned action, confirmation and any armed move selection."""
        self.planned_action = None
        self.confirmed = False
        self.move_armed = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize combatant to a plain dict."""
        return {
            "side": self.side.name,
            "name": self.name,
            "health": self.health,
            "shields": self.shields,
            "ammo": self.ammo,
            "max_ammo": self.max_ammo,
            "pos": list(self.pos),
            "planned_action": self.planned_action.to_dict() if self.planned_action else None,
            "confirmed": self.confirmed,
            "move_armed": self.move_armed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Combatant:
        """Deserialize a combatant from a dict."""
        planned = data.get("planned_action")
        return cls(
            side=Side[data["side"]],
            name=data["name"],
            health=data["health"],
            shields=data["shields"],
            ammo=data["ammo"],
            max_ammo=data["max_ammo"],
            pos=tuple(data["pos"]),
            planned_action=Action.from_dict(planned) if planned else None,
            confirmed=data.get("confirmed", False),
            move_armed=data.get("move_armed", False),
        )

    def __str__(self) -> str:
        return (
            f"{self.label()} hp={self.health} shields={self.shields} "
            f"ammo={self.ammo}/{self.max_ammo} pos={self.pos}"
        )
