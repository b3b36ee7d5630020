import pytest

from arena import Action, ActionType, MatchConfig, PreconditionError, Side
from runtime.session import MatchSession


def _commit(session, kind_a, kind_b):
    session.select_action(Side.A, kind_a)
    session.confirm(Side.A)
    session.select_action(Side.B, kind_b)
    return session.confirm(Side.B)


def test_commit_then_resolve_records_history():
    session = MatchSession()

    assert not session.ready_to_resolve
    assert _commit(session, ActionType.ATTACK, ActionType.DEFEND) is True
    assert session.ready_to_resolve

    frame = session.resolve()

    assert frame.turn == 1
    assert frame.actions == {Side.A: Action.attack(), Side.B: Action.defend()}
    assert frame.logs == ["Player 2 raised a shield", "Player 1 attacked but Player 2 blocked with a shield"]
    assert not frame.done
    assert session.turn == 2
    assert session.history == [frame]
    assert frame.to_dict()["match"]["turn"] == 2


def test_resolve_too_early_raises():
    session = MatchSession()
    session.select_action(Side.A, ActionType.RELOAD)
    session.confirm(Side.A)

    with pytest.raises(PreconditionError):
        session.resolve()
    assert session.history == []


def test_match_property_is_a_snapshot():
    session = MatchSession()

    snapshot = session.match
    snapshot.get(Side.A).health = 1

    assert session.match.get(Side.A).health == 6


def test_exit_to_lobby_resets_everything():
    session = MatchSession(MatchConfig(names={Side.A: "Ann", Side.B: "Bo"}))
    _commit(session, ActionType.ATTACK, ActionType.ATTACK)
    session.resolve()

    match = session.exit_to_lobby()

    assert match.turn == 1
    assert match.get(Side.A).health == 6
    assert match.get(Side.A).name == "Ann"
    assert session.history == []
    assert not session.done


def test_session_finishes_when_a_side_falls():
    session = MatchSession(MatchConfig(health=1))

    _commit(session, ActionType.ATTACK, ActionType.RELOAD)
    frame = session.resolve()

    assert frame.done
    assert session.done
    assert frame.outcome.winner == Side.A
    assert frame.logs[-1] == "🏆 Player 1 wins!"
