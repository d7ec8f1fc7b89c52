"""
Base display interface for the game loop.
"""

from typing import Optional, Tuple, Union

from .events import KeyEvent, ResizeEvent

Event = Union[KeyEvent, ResizeEvent]

DEFAULT_STYLE = 0


class InitializationError(Exception):
    """Raised when a display cannot be created or set up."""


def draw_text(display: "Display", x1: int, y1: int, x2: int, y2: int, style: int, text: str) -> None:
    """
    Write text into the box from (x1, y1) to (x2, y2).

    Characters run left to right and wrap back to x1 on the next row once
    the column reaches x2. Anything past row y2 is dropped.
    """
    row = y1
    col = x1
    for ch in text:
        display.set_cell(col, row, ch, style)
        col += 1
        if col >= x2:
            row += 1
            col = x1
        if row > y2:
            break


class Display:
    """
    Base class/interface for a character-cell screen.

    The loop draws through set_cell/draw_text from the tick thread and
    reads input through poll_event from the input thread.
    """

    def init(self) -> None:
        """
        Prepare the screen for drawing.

        Raises:
            InitializationError: If the screen cannot be created or set up.
        """
        raise NotImplementedError

    def size(self) -> Tuple[int, int]:
        """Return (width, height) in cells."""
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def set_cell(self, x: int, y: int, glyph: str, style: int = DEFAULT_STYLE) -> None:
        raise NotImplementedError

    def draw_text(self, x1: int, y1: int, x2: int, y2: int, style: int, text: str) -> None:
        draw_text(self, x1, y1, x2, y2, style, text)

    def show(self) -> None:
        """Flush everything drawn since the last clear to the terminal."""
        raise NotImplementedError

    def poll_event(self) -> Optional[Event]:
        """
        Wait for the next input event.

        Returns:
            The event, or None if the display's poll timeout passed first.
        """
        raise NotImplementedError

    def finish(self) -> None:
        """Release the screen and restore the terminal."""
        raise NotImplementedError
