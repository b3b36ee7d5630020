"""
Entity definitions for the Tactical Arena.
"""

from .combatant import Combatant

__all__ = [
    "Combatant",
]
