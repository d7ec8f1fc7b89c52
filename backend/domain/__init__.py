"""
Domain entities for the termsnake game.

This module contains the core game entities that are independent of
the terminal and of the loop that drives them.
"""

from .constants import (
    Direction,
    LoopStatus,
    TICK_INTERVAL_SECONDS,
    SNAKE_GLYPH,
    FOOD_GLYPH,
    GAME_OVER_TEXT,
)
from .position import Position
from .game_state import GameState

__all__ = [
    'Direction', 'LoopStatus', 'TICK_INTERVAL_SECONDS',
    'SNAKE_GLYPH', 'FOOD_GLYPH', 'GAME_OVER_TEXT',
    'Position',
    'GameState',
]
