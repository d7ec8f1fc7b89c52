"""
GameState entity - the snake, the food, and the rules that move them.
"""

import logging
import random
from typing import List, Optional, Set

from .constants import Direction, START_FOOD, START_POSITION
from .position import Position

logger = logging.getLogger(__name__)


class GameState:
    """
    The board contents at a point in time.

    Attributes:
        snake: list of Position from head at index 0 to tail at the end
        food: set of Position; holds exactly one cell after every
            successful transition
        rng: random source used to place new food
    """

    def __init__(
        self,
        snake: List[Position],
        food: Set[Position],
        rng: Optional[random.Random] = None
    ):
        if not snake:
            raise ValueError("Snake must have at least one segment.")
        self.snake = [Position(*p) for p in snake]
        self.food = {Position(*p) for p in food}
        self.rng = rng or random.Random()

    @classmethod
    def new(cls, rng: Optional[random.Random] = None) -> "GameState":
        """Return the starting state: a one-segment snake with food right below it."""
        return cls(
            snake=[Position(*START_POSITION)],
            food={Position(*START_FOOD)},
            rng=rng
        )

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.snake[0]

    @property
    def score(self) -> int:
        """Number of feedings so far; the snake starts with one segment."""
        return len(self.snake) - 1

    def transition(self, direction: Direction, width: int, height: int) -> bool:
        """
        Advance the snake one cell in direction on a width x height grid.

        Returns False when the move takes the head off the grid or into
        the body. The body has already been shifted at that point, so a
        False result is terminal and the state should not be moved again.
        """
        logger.debug("Game: %r", self)
        # Keep the old tail so a feeding can grow the snake into it.
        tail = self.snake[-1]
        for i in range(len(self.snake) - 1, 0, -1):
            self.snake[i] = self.snake[i - 1]
        self.snake[0] = self.snake[0].moved(direction)

        head = self.snake[0]
        if head.x < 0 or head.y < 0 or head.x >= width or head.y >= height:
            logger.debug("Head left the grid at %s", head)
            return False

        # A feeding re-appends the old tail, so check it too. Eating food on
        # the cell the tail just left would otherwise repeat that cell.
        grows = head in self.food
        body = self.snake + [tail] if grows else self.snake
        if len(set(body)) != len(body):
            logger.debug("Snake ran into itself at %s", head)
            return False

        if grows:
            logger.debug("Ate food: x=%s y=%s", head.x, head.y)
            self.snake.append(tail)
            self.food.discard(head)
            # Placement ignores the snake, so food can land under it.
            new_food = Position(self.rng.randrange(width), self.rng.randrange(height))
            logger.debug("New food: x=%s y=%s", new_food.x, new_food.y)
            self.food.add(new_food)

        logger.debug("Game: %r", self)
        return True

    def print_board(self, width: int, height: int) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        f = food
        S = snake head
        s = snake body
        Rows run top to bottom, matching the screen.
        """
        board = [['.' for _ in range(width)] for _ in range(height)]

        for fx, fy in self.food:
            if 0 <= fx < width and 0 <= fy < height:
                board[fy][fx] = 'f'

        for idx, (x, y) in enumerate(self.snake):
            if 0 <= x < width and 0 <= y < height:
                board[y][x] = 'S' if idx == 0 else 's'

        return "\n".join(''.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState snake={[tuple(p) for p in self.snake]}, "
            f"food={sorted(tuple(p) for p in self.food)}>"
        )
