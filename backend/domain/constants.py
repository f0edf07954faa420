"""
Game constants for the snake engine.
"""

from enum import Enum, IntEnum
from typing import Tuple


class Direction(Enum):
    """
    The four directions a snake can face, plus NONE for a snake that has not
    started moving yet.

    Each value is the (dx, dy) unit vector. Up decreases y.
    """

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    NONE = (0, 0)

    @property
    def x(self) -> int:
        """The change on the x-axis."""
        return self.value[0]

    @property
    def y(self) -> int:
        """The change on the y-axis."""
        return self.value[1]

    def opposite(self, other: "Direction") -> bool:
        """
        Return True if this direction and `other` oppose one another.

        Two directions oppose each other when their vectors sum to zero.
        NONE only opposes NONE.
        """
        return self.x + other.x == 0 and self.y + other.y == 0

    def step(self, position: Tuple[int, int]) -> Tuple[int, int]:
        """Return `position` moved one cell in this direction."""
        return (position[0] + self.x, position[1] + self.y)


# Cardinal directions a snake can actually travel in
MOVES = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class Tile(IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class State(Enum):
    """
    The states a game can be in.

    Only GAME_OVER is set by the engine itself; RUNNING and PAUSED are left to
    the host loop.
    """

    PAUSED = "paused"
    RUNNING = "running"
    GAME_OVER = "game_over"


# Game settings
INITIAL_SNAKE_SIZE = 3
