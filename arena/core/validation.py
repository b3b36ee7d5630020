"""
Shared rule predicates.

Planning, resolution and "what can I do?" queries all use these checks so
the rules live in one place. Every function here is pure: it reads
combatant state and never writes it.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from .types import ActionValidation, ActionType, GridPos
from ..world.grid import ARENA_GRID

if TYPE_CHECKING:
    from ..entities.combatant import Combatant


def validate_move(mover: Combatant, opponent: Combatant, target: GridPos) -> ActionValidation:
    """
    Check whether the mover may step into a target cell.

    The target must be on the board, inside the mover's zone, not held by
    the opponent, and exactly one orthogonal step away.
    """
    target = tuple(target)
    if len(target) != 2 or not all(isinstance(c, int) and not isinstance(c, bool) for c in target):
        return ActionValidation.fail(
            "OUT_OF_BOUNDS",
            f"{mover.label()} cannot move to {target!r} (not a board cell)"
        )

    if not ARENA_GRID.in_bounds(target):
        return ActionValidation.fail(
            "OUT_OF_BOUNDS",
            f"{mover.label()} cannot move to {target} (out of bounds)"
        )

    if not ARENA_GRID.in_zone(mover.side, target):
        return ActionValidation.fail(
            "OUT_OF_ZONE",
            f"{mover.label()} cannot move to {target} (outside own zone)"
        )

    if opponent.pos == target:
        return ActionValidation.fail(
            "OCCUPIED",
            f"{mover.label()} cannot move to {target} (occupied by {opponent.label()})"
        )

    if ARENA_GRID.manhattan_distance(mover.pos, target) != 1:
        return ActionValidation.fail(
            "NOT_ADJACENT",
            f"{mover.label()} cannot move to {target} (not one step from {mover.pos})"
        )

    return ActionValidation.success()


def is_valid_move(mover: Combatant, opponent: Combatant, target: GridPos) -> bool:
    """Boolean form of validate_move."""
    return validate_move(mover, opponent, target).valid


def in_line_of_fire(attacker: Combatant, defender: Combatant) -> bool:
    """The board is a set of firing lanes: only the row matters, never the distance."""
    return attacker.pos[1] == defender.pos[1]


def can_attack(attacker: Combatant, defender: Combatant) -> bool:
    """True iff both share a row and the attacker has ammo."""
    return in_line_of_fire(attacker, defender) and attacker.ammo > 0


def validate_resources(combatant: Combatant, action_type: ActionType) -> ActionValidation:
    """
    Check the resource gate for planning an action kind.

    - ATTACK needs ammo > 0
    - DEFEND needs shields > 0
    - RELOAD needs ammo below the cap
    - MOVE has no resource gate (the target is checked separately)
    """
    if action_type == ActionType.ATTACK and combatant.ammo <= 0:
        return ActionValidation.fail("NO_AMMO", f"{combatant.label()} has no ammo")

    if action_type == ActionType.DEFEND and combatant.shields <= 0:
        return ActionValidation.fail("NO_SHIELDS", f"{combatant.label()} has no shields left")

    if action_type == ActionType.RELOAD and combatant.ammo >= combatant.max_ammo:
        return ActionValidation.fail(
            "AMMO_FULL",
            f"{combatant.label()} is already at max ammo ({combatant.max_ammo})"
        )

    return ActionValidation.success()
