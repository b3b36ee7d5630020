from arena import ActionType, Match, MatchConfig, Side
from arena.core.validation import can_attack, is_valid_move, validate_move, validate_resources
from arena.entities import Combatant
from arena.world import ARENA_GRID


def _fighter(side: Side, pos, ammo: int = 3, shields: int = 2) -> Combatant:
    return Combatant(side=side, name=f"P{side}", health=6, shields=shields, ammo=ammo, max_ammo=6, pos=pos)


def test_valid_moves_from_start_are_the_four_neighbourhood():
    match = Match.from_config()
    a, b = match.get(Side.A), match.get(Side.B)

    legal = {pos for pos in ARENA_GRID.cells() if is_valid_move(a, b, pos)}

    assert legal == {(0, 1), (2, 1), (1, 0), (1, 2)}


def test_move_rejections_carry_error_codes():
    a = _fighter(Side.A, (2, 1))
    b = _fighter(Side.B, (4, 1))

    assert validate_move(a, b, (3, 1)).error_code == "OUT_OF_ZONE"
    assert validate_move(a, b, (2, 3)).error_code == "OUT_OF_BOUNDS"
    assert validate_move(a, b, (2, -1)).error_code == "OUT_OF_BOUNDS"
    assert validate_move(a, b, (0, 1)).error_code == "NOT_ADJACENT"
    assert validate_move(a, b, (1, 0)).error_code == "NOT_ADJACENT"  # diagonal
    assert validate_move(a, b, (2, 1)).error_code == "NOT_ADJACENT"  # staying still
    assert validate_move(a, b, (2, 0)).valid


def test_right_side_is_confined_to_right_zone():
    a = _fighter(Side.A, (1, 1))
    b = _fighter(Side.B, (3, 0))

    assert not is_valid_move(b, a, (2, 0))
    assert is_valid_move(b, a, (4, 0))
    assert is_valid_move(b, a, (3, 1))


def test_cannot_move_onto_opponent():
    a = _fighter(Side.A, (1, 1))
    b = _fighter(Side.B, (1, 0))

    assert validate_move(a, b, (1, 0)).error_code == "OCCUPIED"


def test_can_attack_depends_on_row_and_ammo_only():
    assert can_attack(_fighter(Side.A, (0, 1)), _fighter(Side.B, (5, 1)))
    assert not can_attack(_fighter(Side.A, (0, 0)), _fighter(Side.B, (5, 1)))
    assert not can_attack(_fighter(Side.A, (0, 1), ammo=0), _fighter(Side.B, (5, 1)))


def test_resource_gates():
    full = _fighter(Side.A, (1, 1), ammo=6)
    empty = _fighter(Side.A, (1, 1), ammo=0, shields=0)

    assert validate_resources(full, ActionType.RELOAD).error_code == "AMMO_FULL"
    assert validate_resources(full, ActionType.ATTACK).valid
    assert validate_resources(empty, ActionType.ATTACK).error_code == "NO_AMMO"
    assert validate_resources(empty, ActionType.DEFEND).error_code == "NO_SHIELDS"
    assert validate_resources(empty, ActionType.RELOAD).valid
    assert validate_resources(empty, ActionType.MOVE).valid


def test_grid_zones():
    assert ARENA_GRID.zone_of((2, 0)) == Side.A
    assert ARENA_GRID.zone_of((3, 2)) == Side.B
    assert ARENA_GRID.zone_of((6, 0)) is None
    assert len(ARENA_GRID.cells()) == 18
    assert sorted(ARENA_GRID.get_neighbors((0, 0))) == [(0, 1), (1, 0)]


def test_default_config_matches_standard_setup():
    match = Match.from_config(MatchConfig.default())
    a, b = match.get(Side.A), match.get(Side.B)

    assert (a.health, a.shields, a.ammo, a.max_ammo, a.pos) == (6, 2, 3, 6, (1, 1))
    assert (b.health, b.shields, b.ammo, b.max_ammo, b.pos) == (6, 3, 3, 6, (4, 1))
    assert match.turn == 1
    assert match.active_side == Side.A
