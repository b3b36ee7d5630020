"""
MatchConfig - Initial values for a new match.

The board shape is fixed; only the starting loadout and names vary.
Defaults reproduce the standard arena setup:

    Side A: "Player 1", health 6, shields 2, ammo 3/6, at (1, 1)
    Side B: "Player 2", health 6, shields 3, ammo 3/6, at (4, 1)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict

from .core.types import GridPos, Side, ARENA_WIDTH, ARENA_HEIGHT, ZONE_SPLIT_X
from .errors import ConfigError


def _per_side(a: Any, b: Any) -> Dict[Side, Any]:
    return {Side.A: a, Side.B: b}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class MatchConfig:
    """
    Starting values for both combatants.

    Attributes:
        names: Display name per side
        health: Starting health (same for both sides)
        shields: Starting shields per side
        ammo: Starting ammo (same for both sides)
        max_ammo: Ammo cap
        start_positions: Starting cell per side
    """

    names: Dict[Side, str] = field(default_factory=lambda: _per_side("Player 1", "Player 2"))
    health: int = 6
    shields: Dict[Side, int] = field(default_factory=lambda: _per_side(2, 3))
    ammo: int = 3
    max_ammo: int = 6
    start_positions: Dict[Side, GridPos] = field(default_factory=lambda: _per_side((1, 1), (4, 1)))

    def __post_init__(self):
        """Validate the configuration against the arena rules."""
        for side in Side:
            if side not in self.names or side not in self.shields or side not in self.start_positions:
                raise ConfigError(f"Config is missing values for side {side}")

        counts = {"health": self.health, "ammo": self.ammo, "max_ammo": self.max_ammo}
        counts.update({f"shields.{side}": value for side, value in self.shields.items()})
        for key, value in counts.items():
            if not _is_int(value):
                raise ConfigError(f"'{key}' must be an integer, got {value!r}")

        if self.health <= 0:
            raise ConfigError(f"Starting health must be positive: {self.health}")
        if self.max_ammo < 0 or self.ammo < 0:
            raise ConfigError(f"Ammo values cannot be negative: {self.ammo}/{self.max_ammo}")
        if self.ammo > self.max_ammo:
            raise ConfigError(f"Starting ammo {self.ammo} exceeds max ammo {self.max_ammo}")

        for side, shields in self.shields.items():
            if shields < 0:
                raise ConfigError(f"Shields cannot be negative for side {side}: {shields}")

        for side, pos in self.start_positions.items():
            pos = tuple(pos) if isinstance(pos, (tuple, list)) else (pos,)
            if len(pos) != 2 or not all(_is_int(c) for c in pos):
                raise ConfigError(f"Start position for side {side} must be an (x, y) int pair: {pos!r}")
            self.start_positions[side] = pos
            x, y = pos
            if not (0 <= x < ARENA_WIDTH and 0 <= y < ARENA_HEIGHT):
                raise ConfigError(f"Start position out of bounds for side {side}: {pos}")
            if (x <= ZONE_SPLIT_X) != (side == Side.A):
                raise ConfigError(f"Start position for side {side} is outside its zone: {pos}")

        if self.start_positions[Side.A] == self.start_positions[Side.B]:
            raise ConfigError("Both sides cannot start on the same cell")

    @classmethod
    def default(cls) -> MatchConfig:
        """Standard arena setup."""
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "names": {side.name: name for side, name in self.names.items()},
            "health": self.health,
            "shields": {side.name: value for side, value in self.shields.items()},
            "ammo": self.ammo,
            "max_ammo": self.max_ammo,
            "start_positions": {side.name: list(pos) for side, pos in self.start_positions.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MatchConfig:
        """
        Construct from a dict (e.g., loaded from JSON).

        Missing keys fall back to the standard setup.
        """
        defaults = cls()

        def sided(key: str, convert=lambda v: v) -> Dict[Side, Any]:
            raw = data.get(key)
            if raw is None:
                return dict(getattr(defaults, key))
            if not isinstance(raw, dict):
                raise ConfigError(f"'{key}' must map side names to values, got {raw!r}")
            merged = dict(getattr(defaults, key))
            for side_name, value in raw.items():
                try:
                    merged[Side[side_name]] = convert(value)
                except KeyError as exc:
                    raise ConfigError(f"Unknown side in '{key}': {side_name!r}") from exc
                except (TypeError, ValueError) as exc:
                    raise ConfigError(f"Bad value in '{key}' for side {side_name!r}: {value!r}") from exc
            return merged

        return cls(
            names=sided("names", str),
            health=data.get("health", defaults.health),
            shields=sided("shields", int),
            ammo=data.get("ammo", defaults.ammo),
            max_ammo=data.get("max_ammo", defaults.max_ammo),
            start_positions=sided("start_positions", tuple),
        )
