"""
Action definitions and utilities.

Actions represent what a combatant plans to do this turn. This module provides:
- Action dataclass (a tagged variant over MOVE/ATTACK/DEFEND/RELOAD)
- Parameter validation
- Action factory methods
- Action serialization
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any, Optional
import json

from .types import ActionType, GridPos


@dataclass(frozen=True)
class Action:
    """
    A planned action for one combatant.

    Only MOVE carries a target cell; ATTACK, DEFEND and RELOAD carry nothing.
    Actions are immutable values so a committed plan cannot be re-targeted
    behind the engine's back.

    Use static factory methods for convenient construction:
        - Action.move((x, y))
        - Action.attack()
        - Action.defend()
        - Action.reload()
    """

    type: ActionType
    target: Optional[GridPos] = None

    def __post_init__(self):
        """Validate action parameters after initialization."""
        self._validate()

    def _validate(self) -> None:
        """
        Validate that the target matches the action type.

        Raises:
            ValueError: If parameters are invalid for the action type
        """
        if not isinstance(self.type, ActionType):
            raise ValueError(f"'type' must be an ActionType enum, got {type(self.type)}")

        if self.type == ActionType.MOVE:
            if self.target is None:
                raise ValueError("MOVE action requires a 'target' cell")
            if (
                not isinstance(self.target, tuple)
                or len(self.target) != 2
                or not all(isinstance(c, int) for c in self.target)
            ):
                raise ValueError(f"'target' must be an (x, y) int tuple, got {self.target!r}")
        elif self.target is not None:
            raise ValueError(f"{self.type.name} action takes no target")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert action to a JSON-serializable dictionary.

        Returns:
            Dictionary representation of the action
        """
        return {
            "type": self.type.name,
            "target": list(self.target) if self.target is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Action:
        """
        Create an action from a dictionary.

        Args:
            data: Dictionary containing 'type' and optional 'target'

        Returns:
            Action instance

        Raises:
            ValueError: If dictionary format is invalid
        """
        if "type" not in data:
            raise ValueError("Action dictionary must contain 'type'")

        try:
            action_type = ActionType[data["type"]]
        except KeyError as exc:
            raise ValueError(f"Unknown action type: {data['type']!r}") from exc

        # JSON turns tuples into lists
        target = data.get("target")
        if target is not None:
            target = tuple(target)

        return cls(type=action_type, target=target)

    def to_json(self) -> str:
        """Convert action to JSON string."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> Action:
        """Create action from JSON string."""
        return cls.from_dict(json.loads(json_str))

    def __str__(self) -> str:
        """Human-readable string representation."""
        if self.type == ActionType.MOVE:
            return f"MOVE to {self.target}"
        return self.type.name

    # FACTORY METHODS
    @staticmethod
    def move(target: GridPos) -> Action:
        """
        Create a MOVE action.

        Args:
            target: Cell to step into (x, y)

        Returns:
            Action that moves the combatant to the target cell.
        """
        return Action(ActionType.MOVE, tuple(target))

    @staticmethod
    def attack() -> Action:
        """Create an ATTACK action (fires down the attacker's row)."""
        return Action(ActionType.ATTACK)

    @staticmethod
    def defend() -> Action:
        """Create a DEFEND action (raises a shield this turn)."""
        return Action(ActionType.DEFEND)

    @staticmethod
    def reload() -> Action:
        """Create a RELOAD action."""
        return Action(ActionType.RELOAD)
