"""
The game loop: a tick thread that advances and renders the game, and an
input path that polls the display for keys.

Both paths stop when the shared cancellation event is set. Ctrl-C from the
player sets it too.
"""

import logging
import random
import threading
from typing import Optional

from display import CursesDisplay, Display, Event, Key, KeyEvent, DEFAULT_STYLE
from domain import (
    Direction,
    GameState,
    LoopStatus,
    TICK_INTERVAL_SECONDS,
    SNAKE_GLYPH,
    FOOD_GLYPH,
    GAME_OVER_TEXT,
)
from services import InputBridge, Ticker

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    Key.DOWN: Direction.DOWN,
    Key.UP: Direction.UP,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class GameLoop:
    """
    Manages:
      - the Display the game is drawn on
      - the GameState and its RUNNING/ENDED status
      - the InputBridge between the input path and the tick path
      - the tick thread

    The game state and status are only touched from the tick thread once
    run() has started it.
    """

    def __init__(
        self,
        display: Display,
        rng: Optional[random.Random] = None,
        tick_interval: float = TICK_INTERVAL_SECONDS,
        continuous: bool = False
    ):
        self.display = display
        self.state = GameState.new(rng)
        self.status = LoopStatus.RUNNING
        self.bridge = InputBridge()
        self.tick_interval = tick_interval
        self.continuous = continuous
        self._tick_thread: Optional[threading.Thread] = None
        self._tick_error: Optional[BaseException] = None

    def handle_event(self, event: Event) -> bool:
        """
        Route one input event. Returns False when the player asked to quit.
        """
        if not isinstance(event, KeyEvent):
            return True
        if event.key is Key.CTRL_C:
            return False
        direction = KEY_DIRECTIONS.get(event.key)
        if direction is not None:
            logger.debug("Key: %s", direction.name)
            self.bridge.publish(direction)
        return True

    def tick(self) -> None:
        """
        Execute one tick:
          1) Clear the screen
          2) Take the pending direction, if any
          3) Move the snake while the game is still running
          4) Draw the board, or the game over text once ended
        """
        self.display.clear()

        if self.continuous:
            direction = self.bridge.latest()
        else:
            direction = self.bridge.consume_latest()

        if self.status is LoopStatus.RUNNING and direction is not None:
            width, height = self.display.size()
            if not self.state.transition(direction, width, height):
                self.status = LoopStatus.ENDED
                logger.info("Game over: score %s", self.state.score)
                logger.debug("Final board:\n%s", self.state.print_board(width, height))

        self.render()

    def render(self) -> None:
        if self.status is LoopStatus.ENDED:
            self.display.draw_text(0, 0, len(GAME_OVER_TEXT), 0, DEFAULT_STYLE, GAME_OVER_TEXT)
        else:
            for p in self.state.snake:
                self.display.set_cell(p.x, p.y, SNAKE_GLYPH, DEFAULT_STYLE)
            for p in self.state.food:
                self.display.set_cell(p.x, p.y, FOOD_GLYPH, DEFAULT_STYLE)
        self.display.show()

    def run(self, cancel: Optional[threading.Event] = None) -> None:
        """
        Play until cancel is set or the player presses Ctrl-C.

        cancel is set on return, so anything else waiting on it stops too.

        Raises:
            InitializationError: If the display cannot be set up. No thread
                is started in that case.
        """
        if cancel is None:
            cancel = threading.Event()

        self.display.init()
        try:
            self.display.clear()
            self.render()

            self._tick_thread = threading.Thread(
                target=self._run_ticker, args=(cancel,), name="tick", daemon=True
            )
            self._tick_thread.start()

            self._read_input(cancel)
        finally:
            cancel.set()
            if self._tick_thread is not None:
                self._tick_thread.join()
            self.display.finish()

        if self._tick_error is not None:
            raise self._tick_error

    def _read_input(self, cancel: threading.Event) -> None:
        while not cancel.is_set():
            event = self.display.poll_event()
            if event is None:
                continue
            if not self.handle_event(event):
                logger.info("Quit requested from the keyboard")
                return

    def _run_ticker(self, cancel: threading.Event) -> None:
        try:
            Ticker(self.tick_interval, self.tick).run(cancel)
        except Exception as e:
            logger.exception("Tick thread failed")
            self._tick_error = e
        finally:
            cancel.set()


def run_loop(
    cancel: Optional[threading.Event] = None,
    display: Optional[Display] = None,
    rng: Optional[random.Random] = None,
    tick_interval: float = TICK_INTERVAL_SECONDS,
    continuous: bool = False
) -> None:
    """
    Starts the game loop on display (a CursesDisplay by default).

    Returns once the loop is cancelled or the player quits; a finished game
    keeps showing its game over screen until then.

    Raises:
        InitializationError: If the screen can't be created.
    """
    if display is None:
        display = CursesDisplay()
    loop = GameLoop(display, rng=rng, tick_interval=tick_interval, continuous=continuous)
    loop.run(cancel)
