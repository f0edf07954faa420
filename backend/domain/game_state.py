"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, Optional

from .constants import Direction, State, INITIAL_SNAKE_SIZE
from .grid import within_bounds


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        state: PAUSED, RUNNING or GAME_OVER
        width, height: board dimensions
        head: (x, y) of the snake's head, possibly out of bounds after a fatal move
        direction: the Direction the snake is facing
        size: target length of the snake
        trail: list of (x, y) behind the head, oldest first
        food: (x, y) of the food tile, or None when there is none
        ticks: number of moves made since the game (re)started
        won: whether the snake filled the whole board
    """

    def __init__(
        self,
        state: State,
        width: int,
        height: int,
        head: Tuple[int, int],
        direction: Direction,
        size: int,
        trail: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        ticks: int = 0,
        won: bool = False
    ):
        self.state = state
        self.width = width
        self.height = height
        self.head = head
        self.direction = direction
        self.size = size
        self.trail = trail
        self.food = food
        self.ticks = ticks
        self.won = won

    @property
    def score(self) -> int:
        """Number of food tiles eaten, derived from growth past the initial size."""
        return max(0, self.size - INITIAL_SNAKE_SIZE)

    @property
    def body(self) -> List[Tuple[int, int]]:
        """Trail cells plus the head, newest last."""
        return self.trail + [self.head]

    def in_bounds(self, x: int, y: int) -> bool:
        """Same bounds rule as Grid.in_bounds(), for the snapshot's dimensions."""
        return within_bounds(x, y, self.width, self.height)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        T = snake trail
        H = snake head
        (0,0) is at the top left, y grows downwards.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'A'

        for x, y in self.trail:
            board[y][x] = 'T'

        hx, hy = self.head
        if self.in_bounds(hx, hy):
            board[hy][hx] = 'H'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Add x-axis labels at the bottom
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState state={self.state.name}, ticks={self.ticks}, head={self.head}, "
            f"size={self.size}, food={self.food}>"
        )
