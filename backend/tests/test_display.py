"""
Tests for the display package: text wrapping and the curses-backed display.
"""

import curses
import os
import sys
import threading
import time
from unittest.mock import DEFAULT, MagicMock, patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from display import (
    CursesDisplay,
    Display,
    InitializationError,
    Key,
    KeyEvent,
    ResizeEvent,
    draw_text,
)


class RecordingDisplay(Display):
    """Display that only remembers which cells were written."""

    def __init__(self):
        self.cells = {}

    def set_cell(self, x, y, glyph, style=0):
        self.cells[(x, y)] = glyph


class TestDrawText:
    """Tests for draw_text() wrapping and truncation."""

    def test_single_row(self):
        display = RecordingDisplay()
        draw_text(display, 0, 0, 9, 0, 0, "game over")
        assert "".join(display.cells[(x, 0)] for x in range(9)) == "game over"
        assert len(display.cells) == 9

    def test_wraps_at_x2(self):
        """Columns wrap back to x1 once they reach x2."""
        display = RecordingDisplay()
        draw_text(display, 2, 1, 5, 3, 0, "abcdefg")
        assert display.cells == {
            (2, 1): "a", (3, 1): "b", (4, 1): "c",
            (2, 2): "d", (3, 2): "e", (4, 2): "f",
            (2, 3): "g",
        }

    def test_truncates_past_y2(self):
        display = RecordingDisplay()
        draw_text(display, 0, 0, 2, 1, 0, "abcdefgh")
        assert display.cells == {(0, 0): "a", (1, 0): "b", (0, 1): "c", (1, 1): "d"}

    def test_display_method_uses_helper(self):
        display = RecordingDisplay()
        display.draw_text(0, 0, 3, 0, 0, "hey")
        assert display.cells == {(0, 0): "h", (1, 0): "e", (2, 0): "y"}

    def test_base_display_methods_are_abstract(self):
        display = Display()
        with pytest.raises(NotImplementedError):
            display.init()
        with pytest.raises(NotImplementedError):
            display.poll_event()


@pytest.fixture
def screen():
    screen = MagicMock()
    screen.getmaxyx.return_value = (24, 80)
    return screen


@pytest.fixture
def curses_mocks(screen):
    with patch.multiple(
        "curses",
        initscr=MagicMock(return_value=screen),
        noecho=DEFAULT,
        raw=DEFAULT,
        curs_set=DEFAULT,
        noraw=DEFAULT,
        echo=DEFAULT,
        endwin=DEFAULT,
    ) as mocks:
        mocks["initscr"] = curses.initscr
        yield mocks


class TestCursesDisplay:
    """Tests for CursesDisplay with the curses library mocked out."""

    def test_init_sets_up_terminal(self, screen, curses_mocks):
        display = CursesDisplay()
        display.init()

        curses_mocks["raw"].assert_called_once()
        curses_mocks["noecho"].assert_called_once()
        screen.keypad.assert_called_once_with(True)
        screen.nodelay.assert_called_once_with(True)
        curses_mocks["curs_set"].assert_called_once_with(0)

    def test_init_failure_raises_initialization_error(self, curses_mocks):
        curses_mocks["initscr"].side_effect = curses.error("no terminal")

        with pytest.raises(InitializationError):
            CursesDisplay().init()

        curses_mocks["endwin"].assert_not_called()

    def test_setup_failure_restores_terminal(self, screen, curses_mocks):
        curses_mocks["raw"].side_effect = curses.error("raw failed")

        with pytest.raises(InitializationError):
            CursesDisplay().init()

        curses_mocks["endwin"].assert_called_once()

    def test_hidden_cursor_is_optional(self, curses_mocks):
        curses_mocks["curs_set"].side_effect = curses.error("unsupported")
        CursesDisplay().init()

    def test_size_is_width_then_height(self, curses_mocks):
        display = CursesDisplay()
        display.init()
        assert display.size() == (80, 24)

    def test_set_cell_writes_row_then_column(self, screen, curses_mocks):
        display = CursesDisplay()
        display.init()
        display.set_cell(3, 7, "s", 0)
        screen.addch.assert_called_once_with(7, 3, "s", 0)

    def test_set_cell_ignores_unwritable_cells(self, screen, curses_mocks):
        screen.addch.side_effect = curses.error("bottom right")
        display = CursesDisplay()
        display.init()
        display.set_cell(79, 23, "f", 0)

    def test_clear_and_show(self, screen, curses_mocks):
        display = CursesDisplay()
        display.init()
        display.clear()
        display.show()
        screen.erase.assert_called_once()
        screen.refresh.assert_called_once()

    @pytest.mark.parametrize("code, key", [
        (curses.KEY_UP, Key.UP),
        (curses.KEY_DOWN, Key.DOWN),
        (curses.KEY_LEFT, Key.LEFT),
        (curses.KEY_RIGHT, Key.RIGHT),
        (3, Key.CTRL_C),
        (ord("q"), Key.OTHER),
    ])
    def test_poll_event_maps_keys(self, screen, curses_mocks, code, key):
        screen.getch.return_value = code
        display = CursesDisplay()
        display.init()
        assert display.poll_event() == KeyEvent(key)

    def test_poll_event_timeout_returns_none(self, screen, curses_mocks):
        """With no key pending, getch is retried until the poll timeout."""
        screen.getch.return_value = -1
        display = CursesDisplay(poll_timeout_ms=50)
        display.init()

        started = time.monotonic()
        assert display.poll_event() is None

        assert time.monotonic() - started >= 0.04
        assert screen.getch.call_count > 1

    def test_drawing_never_overlaps_a_pending_getch(self, screen, curses_mocks):
        """The tick thread waits for an in-flight getch before touching the screen."""
        in_getch = threading.Event()
        overlaps = []

        def slow_getch():
            in_getch.set()
            time.sleep(0.2)
            in_getch.clear()
            return ord("x")

        screen.getch.side_effect = slow_getch
        screen.addch.side_effect = lambda *args: overlaps.append(in_getch.is_set())
        screen.refresh.side_effect = lambda: overlaps.append(in_getch.is_set())
        display = CursesDisplay()
        display.init()

        poller = threading.Thread(target=display.poll_event)
        poller.start()
        assert in_getch.wait(timeout=5)
        display.set_cell(1, 1, "s", 0)
        display.show()
        poller.join(timeout=5)

        assert overlaps == [False, False]

    def test_poll_event_resize(self, screen, curses_mocks):
        screen.getch.return_value = curses.KEY_RESIZE
        display = CursesDisplay()
        display.init()
        assert display.poll_event() == ResizeEvent(80, 24)

    def test_finish_restores_terminal_once(self, screen, curses_mocks):
        display = CursesDisplay()
        display.init()

        display.finish()
        display.finish()

        screen.keypad.assert_called_with(False)
        curses_mocks["noraw"].assert_called_once()
        curses_mocks["echo"].assert_called_once()
        curses_mocks["endwin"].assert_called_once()

    def test_finish_without_init_is_a_no_op(self, curses_mocks):
        CursesDisplay().finish()
        curses_mocks["endwin"].assert_not_called()
