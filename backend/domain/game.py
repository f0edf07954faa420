"""
Game engine - composes the grid and the snake and applies one tick at a time.

The engine only handles the rules. Pacing, input capture and rendering belong
to the host loop, which talks to the engine through turn_snake(),
move_snake(), display() and restart().

Example:

    game = Game(10, 10)
    game.state = State.RUNNING
    while game.state != State.GAME_OVER:
        game.turn_snake(Direction.LEFT)   # captured input
        game.move_snake()
        game.display(render)              # some read-only projection
"""

import logging
import random
from typing import Callable, Optional, Tuple, TypeVar

from .constants import Direction, State, Tile, INITIAL_SNAKE_SIZE
from .game_state import GameState
from .grid import Grid
from .snake import Snake

logger = logging.getLogger(__name__)

R = TypeVar("R")


class Game:
    """
    Manages:
      - Grid (width, height)
      - Snake
      - Food placement
      - Game state (PAUSED / RUNNING / GAME_OVER)

    While the game is not over, the grid holds exactly one FOOD tile.
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()

        self._grid = Grid(width, height)
        self._snake = self._new_snake()
        self.state = State.PAUSED
        self.ticks = 0
        self.won = False

        self._snake.place_head(self._grid)
        self.create_food()

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def snake(self) -> Snake:
        return self._snake

    @property
    def size(self) -> int:
        return self._snake.size

    @property
    def score(self) -> int:
        return self._snake.size - INITIAL_SNAKE_SIZE

    def _new_snake(self) -> Snake:
        return Snake(self.width // 2, self.height // 2, INITIAL_SNAKE_SIZE)

    def turn_snake(self, direction: Direction) -> None:
        """Try to turn the snake, see Snake.turn(). The game state is left alone."""
        self._snake.turn(direction)

    def move_snake(self) -> None:
        """
        Advance the snake by one cell.

        Touching food grows the snake by one and spawns a new food tile.
        Leaving the grid or touching the snake's own body ends the game; in
        that case the new head is never written to the grid.

        Calling this after the game is over does nothing.
        """
        if self.state == State.GAME_OVER:
            return

        snake = self._snake
        grid = self._grid

        # The tail is cut before the collision check so the snake may move
        # into the cell its tail is vacating this tick.
        snake.forward()
        snake.cut_tail(grid)
        self.ticks += 1

        if not snake.in_bounds(grid):
            logger.info(f"Snake left the grid at {snake.head} after {self.ticks} ticks.")
            self.game_over()
            return

        # Read the tile before the head is written over it
        tile = snake.touching_tile(grid)
        if tile == Tile.SNAKE:
            logger.info(f"Snake ran into itself at {snake.head} after {self.ticks} ticks.")
            self.game_over()
            return

        if tile == Tile.FOOD:
            snake.size += 1
            logger.debug(f"Food eaten at {snake.head}, size is now {snake.size}.")
            # The eaten cell still reads FOOD here, so the new food lands elsewhere
            self.create_food()

        snake.place_head(grid)

    def create_food(self) -> bool:
        """
        Place a food tile on a random, previously empty cell.

        Cells are sampled uniformly until an empty one is found. When the
        board has no empty cell left the snake has filled it: the game is
        marked as won and over, and False is returned.
        """
        if not self._grid.has_empty():
            logger.info(f"Board is full with snake size {self._snake.size}; game won.")
            self.won = True
            self.game_over()
            return False

        while True:
            x = self.rng.randrange(self.width)
            y = self.rng.randrange(self.height)
            if self._grid.get(x, y) == Tile.EMPTY:
                self._grid.set(x, y, Tile.FOOD)
                logger.debug(f"Food placed at {(x, y)}.")
                return True

    def display(self, func: Callable[[Grid], R]) -> R:
        """
        Call `func` with the grid and return its result.

        `func` is meant to only read the grid, e.g. to render it.
        """
        return func(self._grid)

    def game_over(self) -> None:
        self.state = State.GAME_OVER

    def restart(self) -> None:
        """Clear the grid, start a new snake and food tile, and pause the game."""
        self._grid.clear()
        self._snake = self._new_snake()
        self._snake.place_head(self._grid)
        self.ticks = 0
        self.won = False
        self.state = State.PAUSED
        self.create_food()
        logger.info("Game restarted.")

    def food_position(self) -> Optional[Tuple[int, int]]:
        cells = self._grid.find(Tile.FOOD)
        return cells[0] if cells else None

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        snake = self._snake
        return GameState(
            state=self.state,
            width=self.width,
            height=self.height,
            head=snake.head,
            direction=snake.direction,
            size=snake.size,
            trail=list(snake.trail),
            food=self.food_position(),
            ticks=self.ticks,
            won=self.won
        )

    def __repr__(self):
        return f"<Game {self.width}x{self.height}, state={self.state.name}, ticks={self.ticks}, size={self.size}>"
