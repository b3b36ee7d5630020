"""
Board and match state for the Tactical Arena.

This module provides:
- Grid: Spatial logic and zones
- Match: Central game state
"""

from .grid import Grid, ARENA_GRID
from .match import Match

__all__ = [
    "Grid",
    "ARENA_GRID",
    "Match",
]
