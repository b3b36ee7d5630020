"""Exception types raised by the arena engine."""

from __future__ import annotations


class ArenaError(Exception):
    """Base class for all arena engine errors."""


class PreconditionError(ArenaError, RuntimeError):
    """An engine call was made in a state that does not allow it (e.g. resolving early)."""


class ConfigError(ArenaError, ValueError):
    """A match configuration is inconsistent with the arena rules."""
