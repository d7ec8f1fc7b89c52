"""
Display implementation on top of the curses terminal library.
"""

import curses
import logging
import threading
import time
from typing import Optional, Tuple

from .base import DEFAULT_STYLE, Display, Event, InitializationError
from .events import Key, KeyEvent, ResizeEvent

logger = logging.getLogger(__name__)

DEFAULT_POLL_TIMEOUT_MS = 100
POLL_SLICE_SECONDS = 0.01
CTRL_C = 3

KEY_MAP = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    CTRL_C: Key.CTRL_C,
}


class CursesDisplay(Display):
    """
    A Display backed by the process's controlling terminal.

    The terminal is put in raw mode so Ctrl-C arrives as a key press rather
    than a signal. curses is not thread-safe, so every screen call holds
    one lock. getch runs non-blocking under that lock and poll_event sleeps
    between attempts with the lock released, waiting at most
    poll_timeout_ms for a key.
    """

    def __init__(self, poll_timeout_ms: int = DEFAULT_POLL_TIMEOUT_MS):
        self.poll_timeout_ms = poll_timeout_ms
        self._screen = None
        self._lock = threading.Lock()

    def init(self) -> None:
        with self._lock:
            try:
                self._screen = curses.initscr()
            except curses.error as e:
                raise InitializationError(f"problem creating screen: {e}") from e

            try:
                curses.noecho()
                curses.raw()
                self._screen.keypad(True)
                self._screen.nodelay(True)
            except curses.error as e:
                self._teardown()
                raise InitializationError(f"init problem: {e}") from e

            try:
                curses.curs_set(0)
            except curses.error:
                logger.debug("Terminal cannot hide the cursor")

        logger.info("Screen initialized at %sx%s", *self.size())

    def size(self) -> Tuple[int, int]:
        with self._lock:
            height, width = self._screen.getmaxyx()
        return width, height

    def clear(self) -> None:
        with self._lock:
            self._screen.erase()

    def set_cell(self, x: int, y: int, glyph: str, style: int = DEFAULT_STYLE) -> None:
        with self._lock:
            try:
                self._screen.addch(y, x, glyph, style)
            except curses.error:
                # Off-screen cells and the bottom-right corner cannot be written.
                pass

    def show(self) -> None:
        with self._lock:
            self._screen.refresh()

    def poll_event(self) -> Optional[Event]:
        deadline = time.monotonic() + self.poll_timeout_ms / 1000.0
        while True:
            with self._lock:
                ch = self._screen.getch()
            if ch != -1:
                break
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return None
            time.sleep(min(POLL_SLICE_SECONDS, remaining))

        if ch == curses.KEY_RESIZE:
            width, height = self.size()
            return ResizeEvent(width, height)
        return KeyEvent(KEY_MAP.get(ch, Key.OTHER))

    def finish(self) -> None:
        with self._lock:
            self._teardown()

    def _teardown(self) -> None:
        if self._screen is None:
            return
        try:
            self._screen.keypad(False)
            curses.noraw()
            curses.echo()
        finally:
            curses.endwin()
            self._screen = None
