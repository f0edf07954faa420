"""
Grid entity - the occupancy map the snake moves on.
"""

from typing import List, Tuple

import numpy as np

from .constants import Tile


def within_bounds(x: int, y: int, width: int, height: int) -> bool:
    """Return True if (x, y) lies within [0, width) x [0, height)."""
    return 0 <= x < width and 0 <= y < height


class Grid:
    """
    NumPy-backed occupancy map of fixed width and height.

    Cells hold Tile codes and are stored as an (height, width) int8 array
    indexed [y, x]. Every accessor goes through in_bounds(); coordinates are
    never clamped or wrapped.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}.")
        self.width = width
        self.height = height
        self.cells = np.full((height, width), Tile.EMPTY, dtype=np.int8)

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies within [0, width) x [0, height)."""
        return within_bounds(x, y, self.width, self.height)

    def get(self, x: int, y: int) -> Tile:
        """
        Return the Tile at (x, y).

        Raises:
            ValueError: If (x, y) is out of bounds
        """
        self._check(x, y)
        return Tile(int(self.cells[y, x]))

    def set(self, x: int, y: int, tile: Tile) -> None:
        """
        Overwrite the Tile at (x, y).

        Raises:
            ValueError: If (x, y) is out of bounds
        """
        self._check(x, y)
        self.cells[y, x] = tile

    def clear(self) -> None:
        """Reset every cell to EMPTY."""
        self.cells[:] = Tile.EMPTY

    def count(self, tile: Tile) -> int:
        return int(np.count_nonzero(self.cells == tile))

    def has_empty(self) -> bool:
        return bool(np.any(self.cells == Tile.EMPTY))

    def find(self, tile: Tile) -> List[Tuple[int, int]]:
        """Return the (x, y) coordinates of every cell holding `tile`."""
        ys, xs = np.nonzero(self.cells == tile)
        return list(zip(xs.tolist(), ys.tolist()))

    def _check(self, x: int, y: int) -> None:
        # numpy would silently accept negative indices
        if not self.in_bounds(x, y):
            raise ValueError(f"Grid access out of bounds at {(x, y)}.")

    def __repr__(self):
        return f"<Grid {self.width}x{self.height}, food={self.count(Tile.FOOD)}, snake={self.count(Tile.SNAKE)}>"
