"""
Position value for the game grid.
"""

from typing import NamedTuple

from .constants import Direction


class Position(NamedTuple):
    """
    A grid cell. x is the column, y is the row, (0, 0) is the top-left.

    Positions carry no bounds of their own; the game state checks them
    against the current display size.
    """
    x: int
    y: int

    def moved(self, direction: Direction) -> "Position":
        """Return the neighbouring cell one unit away along direction."""
        dx, dy = direction.value
        return Position(self.x + dx, self.y + dy)
