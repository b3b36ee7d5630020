"""
Victory condition checking for the arena.

A match ends as soon as a combatant's health drops to zero or below after
a resolution pass. There are no draws: when both fall in the same pass the
check order decides the winner (see VictoryConditions.check).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Dict, Any

from ..core.types import GameResult, Side

if TYPE_CHECKING:
    from ..world.match import Match


@dataclass
class Outcome:
    """
    Result of a victory check: either the match continues or a side won.

    Attributes:
        result: IN_PROGRESS, A_WINS or B_WINS
        reason: Human-readable explanation of the outcome
        winner: Winning side (None while in progress)
    """
    result: GameResult
    reason: str = ""
    winner: Optional[Side] = None

    @staticmethod
    def proceed() -> Outcome:
        """The match continues with another turn."""
        return Outcome(result=GameResult.IN_PROGRESS, reason="Match ongoing")

    @staticmethod
    def won(side: Side, reason: str) -> Outcome:
        """A side won the match."""
        return Outcome(result=GameResult.win_for(side), reason=reason, winner=side)

    @property
    def is_game_over(self) -> bool:
        """Check if the match has ended."""
        return self.result != GameResult.IN_PROGRESS

    def __str__(self) -> str:
        """Human-readable representation."""
        if self.result == GameResult.IN_PROGRESS:
            return "Match in progress"
        return f"{self.result}: {self.reason}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize outcome to a plain dict."""
        return {
            "result": self.result.name,
            "reason": self.reason,
            "winner": self.winner.name if self.winner else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Outcome:
        """Deserialize an outcome from a dict."""
        winner_name = data.get("winner")
        return cls(
            result=GameResult[data["result"]],
            reason=data.get("reason", ""),
            winner=Side[winner_name] if winner_name else None,
        )


class VictoryConditions:
    """
    Stateless checker for the end of a match.

    Tie-break: side A's defeat is checked first. If A is down, B wins even
    if B went down in the same pass. Only when A is still standing is B's
    defeat checked, giving the win to A.
    """

    def check(self, match: Match) -> Outcome:
        """
        Check whether either combatant has been defeated.

        Args:
            match: Match state after a resolution pass

        Returns:
            Outcome for the pass
        """
        a = match.get(Side.A)
        b = match.get(Side.B)

        if not a.alive:
            reason = f"{a.name} was defeated"
            if not b.alive:
                reason = f"{a.name} and {b.name} fell together; {b.name} takes the tie"
            return Outcome.won(Side.B, reason)

        if not b.alive:
            return Outcome.won(Side.A, f"{b.name} was defeated")

        return Outcome.proceed()
