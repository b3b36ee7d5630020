import pytest

from arena import (
    Action,
    ActionType,
    EventKind,
    GameResult,
    MatchConfig,
    MatchPhase,
    PreconditionError,
    Side,
    TurnEngine,
)
from arena.mechanics import TurnResolver


def _plan(engine, match, side, kind, target=None):
    engine.select_action(match, side, kind)
    if kind == ActionType.MOVE:
        engine.pick_move_target(match, side, target)
    engine.confirm(match, side)


def _play(engine, match, a, b):
    """Commit (kind, target) for both sides and resolve."""
    _plan(engine, match, Side.A, *a)
    _plan(engine, match, Side.B, *b)
    return engine.resolve_detailed(match)


ATTACK = (ActionType.ATTACK,)
DEFEND = (ActionType.DEFEND,)
RELOAD = (ActionType.RELOAD,)


def _commit_both_attack(engine, match):
    _plan(engine, match, Side.A, *ATTACK)
    _plan(engine, match, Side.B, *ATTACK)
    return match


def test_mutual_attack_both_hit():
    engine = TurnEngine()
    match = engine.new_match()

    result = _play(engine, match, ATTACK, ATTACK)
    a, b = result.match.get(Side.A), result.match.get(Side.B)

    assert (a.health, a.ammo) == (5, 2)
    assert (b.health, b.ammo) == (5, 2)
    assert result.logs == [
        "Player 1 hit Player 2! damage: 1",
        "Player 2 hit Player 1! damage: 1",
    ]
    assert not result.outcome.is_game_over
    assert result.outcome.result == GameResult.IN_PROGRESS
    assert result.match.turn == 2


def test_attack_against_defend_spends_a_shield():
    engine = TurnEngine()
    match = engine.new_match()

    result = _play(engine, match, ATTACK, DEFEND)
    a, b = result.match.get(Side.A), result.match.get(Side.B)

    assert a.ammo == 2
    assert (b.shields, b.health) == (2, 6)
    assert [e.kind for e in result.events] == [EventKind.SHIELD_RAISED, EventKind.BLOCKED]
    assert result.logs[1] == "Player 1 attacked but Player 2 blocked with a shield"


def test_defend_without_shields_does_not_block():
    match = TurnEngine().new_match()
    a, b = match.get(Side.A), match.get(Side.B)
    a.planned_action = Action.attack()
    b.planned_action = Action.defend()
    b.shields = 0

    result = TurnResolver().resolve(match)
    b = result.match.get(Side.B)

    assert b.health == 5
    assert b.shields == 0
    assert len(result.events_of(EventKind.HIT)) == 1


def test_shields_only_block_while_defending():
    engine = TurnEngine()
    match = engine.new_match()

    result = _play(engine, match, ATTACK, RELOAD)
    b = result.match.get(Side.B)

    assert b.health == 5
    assert b.shields == 3


def test_target_moving_out_of_row_makes_attack_miss():
    engine = TurnEngine()
    match = engine.new_match()

    result = _play(engine, match, ATTACK, (ActionType.MOVE, (4, 0)))
    a, b = result.match.get(Side.A), result.match.get(Side.B)

    assert b.pos == (4, 0)
    assert b.health == 6
    assert a.ammo == 2
    assert result.logs == [
        "Player 2 moved to (5, 1)",
        "Player 1 fired into the void - target not in line of fire",
    ]


def test_moving_into_row_gets_hit_same_turn():
    config = MatchConfig(start_positions={Side.A: (1, 0), Side.B: (4, 1)})
    engine = TurnEngine()
    match = engine.new_match(config)

    result = _play(engine, match, (ActionType.MOVE, (1, 1)), ATTACK)

    assert result.match.get(Side.A).pos == (1, 1)
    assert result.match.get(Side.A).health == 5
    assert [e.kind for e in result.events] == [EventKind.MOVED, EventKind.HIT]


def test_reload_is_capped_at_max_ammo():
    engine = TurnEngine()
    match = engine.new_match()
    match.get(Side.A).ammo = 5

    result = _play(engine, match, RELOAD, RELOAD)

    assert result.match.get(Side.A).ammo == 6
    assert result.match.get(Side.B).ammo == 5
    assert result.logs == [
        "Player 1 reloaded (+1 ammo)",
        "Player 2 reloaded (+2 ammo)",
    ]


def test_attack_without_ammo_is_logged_and_spends_nothing():
    match = TurnEngine().new_match()
    a = match.get(Side.A)
    a.ammo = 0
    a.planned_action = Action.attack()

    result = TurnResolver().resolve(match)

    assert result.match.get(Side.A).ammo == 0
    assert result.match.get(Side.B).health == 6
    assert result.logs == ["Player 1 tried to attack but has no ammo"]


def test_side_without_plan_passes_silently():
    match = TurnEngine().new_match()
    match.get(Side.B).planned_action = Action.reload()

    result = TurnResolver().resolve(match)

    assert result.logs == ["Player 2 reloaded (+2 ammo)"]
    assert result.match.turn == 2


def test_resolve_does_not_touch_input_match():
    engine = TurnEngine()
    match = engine.new_match()
    _plan(engine, match, Side.A, *ATTACK)
    _plan(engine, match, Side.B, *ATTACK)
    before = match.to_dict()

    engine.resolve(match)

    assert match.to_dict() == before


def test_resolve_before_both_confirm_is_an_error():
    engine = TurnEngine()
    match = engine.new_match()
    _plan(engine, match, Side.A, *ATTACK)

    with pytest.raises(PreconditionError):
        engine.resolve(match)


def test_simultaneous_knockout_goes_to_side_b():
    engine = TurnEngine()
    match = engine.new_match(MatchConfig(ammo=6))

    for turn in range(1, 7):
        assert match.turn == turn
        match, logs, outcome = engine.resolve(_commit_both_attack(engine, match))

    a, b = match.get(Side.A), match.get(Side.B)
    assert a.health == 0 and b.health == 0
    assert outcome.is_game_over
    assert outcome.winner == Side.B
    assert outcome.result == GameResult.B_WINS
    assert logs[-1] == "🏆 Player 2 wins!"
    assert match.phase == MatchPhase.FINISHED
    assert match.winner == Side.B
    assert match.turn == 6

    with pytest.raises(PreconditionError):
        engine.resolve(match)


def test_last_hit_wins_for_side_a_when_only_b_falls():
    engine = TurnEngine()
    match = engine.new_match()
    match.get(Side.B).health = 1

    result = _play(engine, match, ATTACK, RELOAD)

    assert result.outcome.winner == Side.A
    assert result.events[-1].kind == EventKind.VICTORY
    assert result.logs[-1] == "🏆 Player 1 wins!"
    assert result.match.get(Side.B).health == 0
    assert result.match.turn == 1


def test_b_still_fires_back_after_taking_lethal_damage():
    engine = TurnEngine()
    match = engine.new_match()
    match.get(Side.A).health = 1
    match.get(Side.B).health = 1

    result = _play(engine, match, ATTACK, ATTACK)

    assert len(result.events_of(EventKind.HIT)) == 2
    assert result.match.get(Side.A).health == 0
    assert result.outcome.winner == Side.B


def test_finished_match_rejects_planning():
    engine = TurnEngine()
    match = engine.new_match()
    match.get(Side.B).health = 1
    match, _logs, _outcome = engine.resolve(_commit_both_attack(engine, match))

    assert engine.select_action(match, Side.A, ActionType.RELOAD).error_code == "NOT_PLANNING"
    assert engine.confirm(match, Side.A) is False
