"""
CommitmentTracker - Planning, confirmation and cancellation.

This module handles the planning half of a turn:
- Arming Move and picking its target cell
- Planning Attack / Defend / Reload behind their resource gates
- Confirming a plan (which makes it immutable)
- Cancelling an unconfirmed plan
- Advancing which side is planning

Policy: ALTERNATING. Each turn starts with side A planning. When the active
side confirms, control passes to the other side if it has not confirmed
yet; when both have confirmed the match enters BOTH_COMMITTED and waits for
the caller to resolve. Calls made for the side that is not planning are
no-ops. The tracker never triggers resolution itself.

Every mutator is total: illegal input is answered with a failed
ActionValidation and leaves the match untouched.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..core.types import ActionType, ActionValidation, GridPos, MatchPhase, Side
from ..core.actions import Action
from ..core.validation import validate_move, validate_resources
from infra.logger import get_logger

if TYPE_CHECKING:
    from ..world.match import Match

log = get_logger(__name__)


class CommitmentTracker:
    """
    Stateless planner operating on a Match in place.

    All planning state (planned action, confirmation flag, armed Move
    selection, active side, phase) lives on the Match itself.
    """

    def select_action(self, match: Match, side: Side, action_type: ActionType) -> ActionValidation:
        """
        Choose an action kind for a side.

        MOVE only arms target selection; pick_move_target() must follow.
        ATTACK, DEFEND and RELOAD are planned immediately if their resource
        gate passes, overwriting any previous plan.

        Args:
            match: Match to update (modified in-place)
            side: Side choosing an action
            action_type: Kind of action

        Returns:
            ActionValidation describing whether the call took effect
        """
        validation = self._check_can_plan(match, side)
        if not validation.valid:
            return self._noop(validation)

        combatant = match.get(side)

        if action_type == ActionType.MOVE:
            combatant.move_armed = True
            return ActionValidation.success(f"{combatant.label()} is choosing a cell to move to")

        validation = validate_resources(combatant, action_type)
        if not validation.valid:
            return self._noop(validation)

        combatant.planned_action = Action(action_type)
        combatant.move_armed = False
        log.debug("%s planned %s", combatant.label(), action_type.name)
        return ActionValidation.success(f"{combatant.label()} planned {action_type.name}")

    def pick_move_target(self, match: Match, side: Side, target: GridPos) -> ActionValidation:
        """
        Pick the destination cell after arming Move.

        Args:
            match: Match to update (modified in-place)
            side: Side picking a cell
            target: Destination cell (x, y)

        Returns:
            ActionValidation describing whether the move was planned
        """
        validation = self._check_can_plan(match, side)
        if not validation.valid:
            return self._noop(validation)

        combatant = match.get(side)
        if not combatant.move_armed:
            return self._noop(ActionValidation.fail(
                "MOVE_NOT_ARMED",
                f"{combatant.label()} has not selected Move"
            ))

        validation = validate_move(combatant, match.opponent_of(side), target)
        if not validation.valid:
            return self._noop(validation)

        combatant.planned_action = Action.move(target)
        combatant.move_armed = False
        log.debug("%s planned MOVE to %s", combatant.label(), tuple(target))
        return ActionValidation.success(f"{combatant.label()} planned a move to {tuple(target)}")

    def confirm(self, match: Match, side: Side) -> bool:
        """
        Commit a side's planned action.

        Args:
            match: Match to update (modified in-place)
            side: Side confirming

        Returns:
            True if both sides are now confirmed
        """
        validation = self.validate_confirm(match, side)
        if not validation.valid:
            self._noop(validation)
            return match.both_confirmed

        combatant = match.get(side)
        combatant.confirmed = True
        combatant.move_armed = False
        log.info("Turn %d: %s confirmed %s", match.turn, combatant.label(), combatant.planned_action)

        other = match.opponent_of(side)
        if other.confirmed:
            match.phase = MatchPhase.BOTH_COMMITTED
            match.active_side = None
        else:
            match.active_side = other.side

        return match.both_confirmed

    def validate_confirm(self, match: Match, side: Side) -> ActionValidation:
        """Check whether confirm() would take effect, without applying it."""
        validation = self._check_can_plan(match, side)
        if not validation.valid:
            return validation

        combatant = match.get(side)
        if combatant.planned_action is None:
            return ActionValidation.fail(
                "NO_PLANNED_ACTION",
                f"{combatant.label()} has nothing to confirm"
            )
        return ActionValidation.success()

    def cancel(self, match: Match, side: Side) -> ActionValidation:
        """
        Drop an unconfirmed plan and any armed Move selection.

        Confirmed plans are immutable; cancelling one is a no-op.

        Args:
            match: Match to update (modified in-place)
            side: Side cancelling

        Returns:
            ActionValidation describing whether anything was cleared
        """
        validation = self._check_can_plan(match, side)
        if not validation.valid:
            return self._noop(validation)

        combatant = match.get(side)
        combatant.clear_plan()
        log.debug("%s cancelled its plan", combatant.label())
        return ActionValidation.success(f"{combatant.label()} cleared its plan")

    def start_turn(self, match: Match) -> None:
        """Clear both plans and hand planning to side A."""
        for combatant in match.combatants:
            combatant.clear_plan()
        match.phase = MatchPhase.PLANNING
        match.active_side = Side.A

    def _check_can_plan(self, match: Match, side: Side) -> ActionValidation:
        if match.phase != MatchPhase.PLANNING:
            return ActionValidation.fail(
                "NOT_PLANNING",
                f"Match is not accepting plans (phase: {match.phase})"
            )

        combatant = match.get(side)
        if combatant.confirmed:
            return ActionValidation.fail(
                "ALREADY_CONFIRMED",
                f"{combatant.label()} already confirmed its action"
            )

        if match.active_side != side:
            return ActionValidation.fail(
                "NOT_ACTIVE_SIDE",
                f"It is not {combatant.label()}'s turn to plan"
            )

        return ActionValidation.success()

    @staticmethod
    def _noop(validation: ActionValidation) -> ActionValidation:
        log.debug("Planning call ignored [%s]: %s", validation.error_code, validation.message)
        return validation
