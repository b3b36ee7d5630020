"""
Match - Central state of one arena game.

The Match holds:
- Both combatants
- The turn counter
- The commitment phase and which side is planning
- The final result once a side has won

It does NOT handle:
- Planning rules (delegated to CommitmentTracker)
- Turn resolution (delegated to TurnResolver)
- Victory checking (delegated to VictoryConditions)
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from .grid import Grid, ARENA_GRID
from ..config import MatchConfig
from ..core.types import GameResult, MatchPhase, Side
from ..entities.combatant import Combatant


class Match:
    """
    The state of one game session.

    A Match is created once per session (see Match.from_config) and
    discarded on exit to the lobby.

    Attributes:
        grid: The fixed arena board
        turn: Current turn number, starting at 1
        phase: Commitment phase
        active_side: Side currently planning (None outside PLANNING)
        result: Game outcome, IN_PROGRESS until a side wins
        winner: Winning side once FINISHED
    """

    def __init__(
            self,
            combatants: Dict[Side, Combatant],
            turn: int = 1,
            phase: MatchPhase = MatchPhase.PLANNING,
            active_side: Optional[Side] = Side.A,
            result: GameResult = GameResult.IN_PROGRESS,
            winner: Optional[Side] = None,
    ):
        if set(combatants) != set(Side):
            raise ValueError(f"A match needs exactly one combatant per side, got {sorted(map(str, combatants))}")
        if combatants[Side.A].pos == combatants[Side.B].pos:
            raise ValueError(f"Combatants cannot share a cell: {combatants[Side.A].pos}")

        self.grid: Grid = ARENA_GRID
        self._combatants = combatants
        self.turn = turn
        self.phase = phase
        self.active_side = active_side
        self.result = result
        self.winner = winner

    @classmethod
    def from_config(cls, config: Optional[MatchConfig] = None) -> Match:
        """
        Build the initial state of a new match.

        Args:
            config: Starting values (standard setup if None)

        Returns:
            Match at turn 1 with side A planning
        """
        config = config or MatchConfig.default()
        combatants = {
            side: Combatant(
                side=side,
                name=config.names[side],
                health=config.health,
                shields=config.shields[side],
                ammo=config.ammo,
                max_ammo=config.max_ammo,
                pos=config.start_positions[side],
            )
            for side in Side
        }
        return cls(combatants)

    # ========================================================================
    # COMBATANT ACCESS
    # ========================================================================

    def get(self, side: Side) -> Combatant:
        """Get the combatant for a side."""
        return self._combatants[side]

    def opponent_of(self, side: Side) -> Combatant:
        """Get the combatant opposing a side."""
        return self._combatants[side.opponent]

    @property
    def combatants(self) -> List[Combatant]:
        """Both combatants, side A first."""
        return [self._combatants[Side.A], self._combatants[Side.B]]

    # ========================================================================
    # PHASE QUERIES
    # ========================================================================

    @property
    def both_confirmed(self) -> bool:
        return all(c.confirmed for c in self.combatants)

    @property
    def is_finished(self) -> bool:
        return self.phase == MatchPhase.FINISHED

    def phase_text(self) -> str:
        """Short status banner for the current phase."""
        if self.phase == MatchPhase.PLANNING and self.active_side is not None:
            return f"Turn {self.turn} • {self.get(self.active_side).name} is planning"
        if self.phase == MatchPhase.BOTH_COMMITTED:
            return f"Turn {self.turn} • ready to resolve"
        if self.phase == MatchPhase.FINISHED:
            winner = self.get(self.winner).name if self.winner else "nobody"
            return f"Turn {self.turn} • results ({winner} won)"
        return f"Turn {self.turn}"

    # ========================================================================
    # UTILITY
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize match state to dictionary.

        Returns:
            JSON-serializable dictionary of complete match state
        """
        return {
            "grid": {
                "width": self.grid.width,
                "height": self.grid.height,
            },
            "combatants": [c.to_dict() for c in self.combatants],
            "turn": self.turn,
            "phase": self.phase.name,
            "active_side": self.active_side.name if self.active_side else None,
            "result": self.result.name,
            "winner": self.winner.name if self.winner else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Match:
        """
        Deserialize match state from dictionary.

        Args:
            data: Dictionary from to_dict()

        Returns:
            Reconstructed Match
        """
        combatants = {}
        for entry in data["combatants"]:
            combatant = Combatant.from_dict(entry)
            combatants[combatant.side] = combatant

        active = data.get("active_side")
        winner = data.get("winner")
        return cls(
            combatants=combatants,
            turn=data.get("turn", 1),
            phase=MatchPhase[data.get("phase", MatchPhase.PLANNING.name)],
            active_side=Side[active] if active else None,
            result=GameResult[data.get("result", GameResult.IN_PROGRESS.name)],
            winner=Side[winner] if winner else None,
        )

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> Match:
        """Deserialize from JSON."""
        return cls.from_dict(json.loads(json_str))

    def clone(self) -> Match:
        """
        Create a deep copy of this match.

        Returns:
            Independent copy of this Match
        """
        return Match.from_dict(self.to_dict())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Match):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        """String representation."""
        return f"Match(turn={self.turn}, phase={self.phase}, active={self.active_side})"

    def __repr__(self) -> str:
        """Detailed representation."""
        return (f"Match(turn={self.turn}, phase={self.phase}, active={self.active_side}, "
                f"A={self.get(Side.A)}, B={self.get(Side.B)})")
