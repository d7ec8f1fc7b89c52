"""
Game constants for termsnake.
"""

from enum import Enum


class Direction(Enum):
    """A pending move. Each member carries its (dx, dy) delta."""
    DOWN = (0, 1)
    UP = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class LoopStatus(Enum):
    RUNNING = "running"
    ENDED = "ended"


# Game settings
TICK_INTERVAL_SECONDS = 0.1
START_POSITION = (0, 0)
START_FOOD = (0, 1)

# Rendering
SNAKE_GLYPH = "s"
FOOD_GLYPH = "f"
GAME_OVER_TEXT = "game over"
