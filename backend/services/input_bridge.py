"""
Single-slot hand-off of the latest direction from the input thread to the
tick thread.
"""

import threading
from typing import Optional

from domain.constants import Direction


class InputBridge:
    """
    Holds at most one pending Direction.

    publish() overwrites whatever is pending, so only the most recent key
    between two ticks is seen. The lock is held only for the read or write.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._pending: Optional[Direction] = None

    def publish(self, direction: Direction) -> None:
        with self._lock:
            self._pending = direction

    def consume_latest(self) -> Optional[Direction]:
        """Return the pending direction and empty the slot."""
        with self._lock:
            direction = self._pending
            self._pending = None
        return direction

    def latest(self) -> Optional[Direction]:
        """Return the pending direction without emptying the slot."""
        with self._lock:
            return self._pending
