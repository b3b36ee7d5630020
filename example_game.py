"""
Example script demonstrating a scripted arena match.

This shows how to:
1. Start a session
2. Plan and confirm both sides' actions
3. Resolve each turn and read the log
4. Return to the lobby
"""

from arena import ActionType, Side
from infra.logger import configure_logging
from runtime.session import MatchSession


# Each entry: (action for A, action for B). A MOVE entry carries its target cell.
SCRIPT = [
    ((ActionType.ATTACK, None), (ActionType.DEFEND, None)),
    ((ActionType.MOVE, (1, 0)), (ActionType.ATTACK, None)),
    ((ActionType.RELOAD, None), (ActionType.MOVE, (4, 0))),
    ((ActionType.ATTACK, None), (ActionType.ATTACK, None)),
]


def plan(session: MatchSession, side: Side, kind: ActionType, target) -> None:
    session.select_action(side, kind)
    if kind == ActionType.MOVE:
        session.pick_move_target(side, target)
    session.confirm(side)


def main():
    """Run a short scripted match, then keep trading shots until someone falls."""
    configure_logging("WARNING", logfile=None)

    print("Tactical Arena - Example Match")
    print("=" * 60)

    session = MatchSession()

    for (a_kind, a_target), (b_kind, b_target) in SCRIPT:
        print(session.match.phase_text())
        plan(session, Side.A, a_kind, a_target)
        plan(session, Side.B, b_kind, b_target)
        frame = session.resolve()
        for line in frame.logs:
            print(f"  {line}")

    while not session.done:
        print(session.match.phase_text())
        for side in Side:
            affordances = session.available_actions(side)
            kind = ActionType.ATTACK if affordances.attack else ActionType.RELOAD
            plan(session, side, kind, None)
        frame = session.resolve()
        for line in frame.logs:
            print(f"  {line}")

    print("=" * 60)
    print(session.match.phase_text())
    for combatant in session.match.combatants:
        print(f"  {combatant}")

    session.exit_to_lobby()


if __name__ == "__main__":
    main()
