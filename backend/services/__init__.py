"""
Services shared by the game loop: the input hand-off and the ticker.
"""

from .input_bridge import InputBridge
from .ticker import Ticker

__all__ = [
    'InputBridge',
    'Ticker',
]
