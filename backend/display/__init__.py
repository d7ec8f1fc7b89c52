"""
Display implementations for termsnake.

The game loop only talks to the Display interface; CursesDisplay is the
terminal-backed implementation used when the game is played.
"""

from .base import Display, Event, InitializationError, DEFAULT_STYLE, draw_text
from .events import Key, KeyEvent, ResizeEvent
from .curses_display import CursesDisplay

__all__ = [
    'Display',
    'Event',
    'InitializationError',
    'DEFAULT_STYLE',
    'draw_text',
    'Key',
    'KeyEvent',
    'ResizeEvent',
    'CursesDisplay',
]
