"""
Input events delivered by a Display.
"""

from dataclasses import dataclass
from enum import Enum


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CTRL_C = "ctrl_c"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    key: Key


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int
