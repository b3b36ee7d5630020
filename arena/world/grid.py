"""
Grid - Spatial logic for the arena.

The Grid handles:
- Coordinate validation
- Zone membership (left half for side A, right half for side B)
- Distance calculations
- Neighbourhood queries

Coordinate System:
- X increases to the RIGHT
- Y increases DOWNWARD (row 0 is the top lane)
- Origin (0, 0) is at TOP-LEFT
"""

from __future__ import annotations
from typing import List, Optional
from ..core.types import GridPos, Side, ARENA_WIDTH, ARENA_HEIGHT, ZONE_SPLIT_X


class Grid:
    """
    The fixed 6x3 arena board split into two 3x3 zones.

    Provides spatial queries without game logic or state.

    Attributes:
        width: Grid width (X dimension)
        height: Grid height (Y dimension)
    """

    width = ARENA_WIDTH
    height = ARENA_HEIGHT

    def in_bounds(self, pos: GridPos) -> bool:
        """
        Check if a position is within grid boundaries.

        Args:
            pos: Position to check (x, y)

        Returns:
            True if position is valid, False otherwise
        """
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def zone_of(self, pos: GridPos) -> Optional[Side]:
        """
        Get the side whose zone contains a position.

        Args:
            pos: Position to check (x, y)

        Returns:
            Side.A for the left half, Side.B for the right half,
            None if the position is off the board
        """
        if not self.in_bounds(pos):
            return None
        return Side.A if pos[0] <= ZONE_SPLIT_X else Side.B

    def in_zone(self, side: Side, pos: GridPos) -> bool:
        """Check if a position lies in the given side's half of the board."""
        x = pos[0]
        if side == Side.A:
            return x <= ZONE_SPLIT_X
        return x > ZONE_SPLIT_X

    def manhattan_distance(self, a: GridPos, b: GridPos) -> int:
        """
        Calculate Manhattan (taxicab) distance between two positions.

        Args:
            a: First position (x, y)
            b: Second position (x, y)

        Returns:
            Manhattan distance as an integer
        """
        return abs(a[0] - b[0]) + abs(a[1] - b[1])

    def get_neighbors(self, pos: GridPos) -> List[GridPos]:
        """
        Get in-bounds cardinal neighbours (no diagonals).

        Args:
            pos: Center position

        Returns:
            List of valid neighbouring positions
        """
        x, y = pos

        candidates = [
            (x, y - 1),  # UP
            (x, y + 1),  # DOWN
            (x - 1, y),  # LEFT
            (x + 1, y),  # RIGHT
        ]

        return [p for p in candidates if self.in_bounds(p)]

    def cells(self) -> List[GridPos]:
        """All cells in row-major order (top row first)."""
        return [(x, y) for y in range(self.height) for x in range(self.width)]

    def __str__(self) -> str:
        """String representation."""
        return f"Grid({self.width}x{self.height})"

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"Grid(width={self.width}, height={self.height})"


# The board never changes shape, so one shared instance is enough.
ARENA_GRID = Grid()
