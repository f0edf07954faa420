"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Deque, Tuple

from .constants import Direction, Tile
from .grid import Grid


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        head: signed (x, y) of the head; may lie outside the grid right after
            forward() until the engine checks in_bounds()
        direction: the Direction the snake is facing
        size: target length of the trail
        trail: deque of previously occupied (x, y), oldest first

    The snake never keeps a reference to the grid. Every method that reads or
    writes cells receives it as an argument.
    """

    def __init__(self, x: int, y: int, size: int):
        self.head: Tuple[int, int] = (x, y)
        self.direction = Direction.NONE
        self.size = size
        self.trail: Deque[Tuple[int, int]] = deque()

    @property
    def x(self) -> int:
        return self.head[0]

    @property
    def y(self) -> int:
        return self.head[1]

    def turn(self, direction: Direction) -> None:
        """Face `direction`, unless it would reverse the snake onto itself."""
        if not self.direction.opposite(direction):
            self.direction = direction

    def forward(self) -> None:
        """
        Append the current head to the trail and advance one cell.

        Neither bounds nor collisions are checked here.
        """
        self.trail.append(self.head)
        self.head = self.direction.step(self.head)

    def cut_tail(self, grid: Grid) -> None:
        """Drop the oldest trail cell, and free it on the grid, once the trail reached size."""
        if len(self.trail) >= self.size:
            x, y = self.trail.popleft()
            grid.set(x, y, Tile.EMPTY)

    def touching_tile(self, grid: Grid) -> Tile:
        """
        Return the Tile under the head.

        Raises:
            ValueError: If the head is out of bounds
        """
        return grid.get(self.x, self.y)

    def place_head(self, grid: Grid) -> None:
        """
        Mark the head cell as SNAKE.

        Raises:
            ValueError: If the head is out of bounds
        """
        grid.set(self.x, self.y, Tile.SNAKE)

    def in_bounds(self, grid: Grid) -> bool:
        return 0 <= self.x and 0 <= self.y and grid.in_bounds(self.x, self.y)

    def __repr__(self):
        return (
            f"<Snake head={self.head}, direction={self.direction.name}, "
            f"size={self.size}, trail={len(self.trail)}>"
        )
