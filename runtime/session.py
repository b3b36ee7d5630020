from __future__ import annotations

from typing import List, Optional

from arena import (
    ActionType,
    ActionValidation,
    Affordances,
    GridPos,
    Match,
    MatchConfig,
    Side,
    TurnEngine,
)
from infra.logger import get_logger
from .frame import Frame

log = get_logger(__name__)


class MatchSession:
    """
    Caller-side driver for one game session.

    Holds the current Match (the engine itself stores none), forwards
    planning calls, and exposes the two-step commit-then-resolve shape:
    a UI checks `ready_to_resolve`, may pause, then calls `resolve()`.
    Every resolved turn is kept as a Frame in `history`.
    """

    def __init__(self, config: Optional[MatchConfig] = None, engine: Optional[TurnEngine] = None):
        self.config = config or MatchConfig.default()
        self.engine = engine or TurnEngine()
        self._match = self.engine.new_match(self.config)
        self.history: List[Frame] = []

        log.info("MatchSession started")

    # ------------------------------------------------------------------#
    # Core API
    # ------------------------------------------------------------------#
    def select_action(self, side: Side, kind: ActionType) -> ActionValidation:
        return self.engine.select_action(self._match, side, kind)

    def pick_move_target(self, side: Side, target: GridPos) -> ActionValidation:
        return self.engine.pick_move_target(self._match, side, target)

    def confirm(self, side: Side) -> bool:
        return self.engine.confirm(self._match, side)

    def cancel(self, side: Side) -> ActionValidation:
        return self.engine.cancel(self._match, side)

    def resolve(self) -> Frame:
        """
        Resolve the committed turn and record it.

        Raises:
            PreconditionError: If not both sides have confirmed, or the match is over
        """
        actions = {c.side: c.planned_action for c in self._match.combatants}
        turn = self._match.turn

        result = self.engine.resolve_detailed(self._match)
        self._match = result.match

        frame = Frame(
            turn=turn,
            actions=actions,
            events=result.events,
            outcome=result.outcome,
            match=result.match.clone(),
        )
        self.history.append(frame)

        if frame.done:
            log.info("Session finished after %d turns: %s", len(self.history), result.outcome)
        return frame

    def exit_to_lobby(self) -> Match:
        """Discard the current match and start over from the initial state."""
        log.info("Exit to lobby on turn %d; resetting match", self._match.turn)
        self._match = self.engine.new_match(self.config)
        self.history.clear()
        return self._match

    # ------------------------------------------------------------------#
    # Queries
    # ------------------------------------------------------------------#
    @property
    def match(self) -> Match:
        """A copy of the current match; mutate it only through the session."""
        return self._match.clone()

    @property
    def turn(self) -> int:
        return self._match.turn

    @property
    def ready_to_resolve(self) -> bool:
        return self.engine.both_confirmed(self._match)

    @property
    def done(self) -> bool:
        return self._match.is_finished

    def valid_moves(self, side: Side) -> List[GridPos]:
        return self.engine.valid_moves(self._match, side)

    def available_actions(self, side: Side) -> Affordances:
        return self.engine.available_actions(self._match, side)
