"""
Tests for domain/grid.py - the occupancy map.
"""

import pytest
import sys
import os

import numpy as np

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import Tile
from domain.grid import Grid, within_bounds


class TestGridConstruction:
    """Tests for creating a Grid."""

    def test_new_grid_is_empty(self):
        """Every cell of a new grid is EMPTY."""
        grid = Grid(7, 4)
        for x in range(7):
            for y in range(4):
                assert grid.get(x, y) == Tile.EMPTY

    def test_dimensions(self):
        """Grid keeps its width and height; the array is (height, width)."""
        grid = Grid(7, 4)
        assert grid.width == 7
        assert grid.height == 4
        assert grid.cells.shape == (4, 7)
        assert grid.cells.dtype == np.int8

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
    def test_non_positive_dimensions_rejected(self, width, height):
        """Grid refuses non-positive dimensions."""
        with pytest.raises(ValueError, match="must be positive"):
            Grid(width, height)


class TestGridAccess:
    """Tests for get/set and bounds checking."""

    def test_set_then_get(self):
        """A tile written with set() is returned by get()."""
        grid = Grid(5, 5)
        grid.set(1, 3, Tile.FOOD)
        assert grid.get(1, 3) == Tile.FOOD
        assert grid.get(3, 1) == Tile.EMPTY

    def test_get_returns_tile_enum(self):
        """get() converts the stored code back to a Tile."""
        grid = Grid(2, 2)
        grid.set(0, 0, Tile.SNAKE)
        assert isinstance(grid.get(0, 0), Tile)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 4), (5, 4)])
    def test_in_bounds_false_outside(self, x, y):
        """in_bounds() rejects anything outside [0, W) x [0, H)."""
        assert Grid(5, 4).in_bounds(x, y) is False

    @pytest.mark.parametrize("x,y", [(0, 0), (4, 3), (2, 1)])
    def test_in_bounds_true_inside(self, x, y):
        assert Grid(5, 4).in_bounds(x, y) is True

    def test_in_bounds_uses_within_bounds(self):
        """Grid.in_bounds() and within_bounds() agree on every cell around the grid."""
        grid = Grid(5, 4)
        for x in range(-2, 8):
            for y in range(-2, 7):
                assert grid.in_bounds(x, y) == within_bounds(x, y, 5, 4)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 4)])
    def test_get_out_of_bounds_raises(self, x, y):
        """Out-of-bounds reads are precondition violations, negative indices included."""
        with pytest.raises(ValueError, match="out of bounds"):
            Grid(5, 4).get(x, y)

    @pytest.mark.parametrize("x,y", [(-1, -1), (5, 3)])
    def test_set_out_of_bounds_raises(self, x, y):
        """Out-of-bounds writes raise and leave the grid untouched."""
        grid = Grid(5, 4)
        with pytest.raises(ValueError):
            grid.set(x, y, Tile.SNAKE)
        assert grid.count(Tile.SNAKE) == 0


class TestGridHelpers:
    """Tests for clear/count/find/has_empty."""

    def test_count_and_find(self):
        grid = Grid(4, 4)
        grid.set(0, 1, Tile.SNAKE)
        grid.set(3, 2, Tile.SNAKE)
        grid.set(2, 2, Tile.FOOD)

        assert grid.count(Tile.SNAKE) == 2
        assert grid.count(Tile.FOOD) == 1
        assert grid.count(Tile.EMPTY) == 13
        assert sorted(grid.find(Tile.SNAKE)) == [(0, 1), (3, 2)]
        assert grid.find(Tile.FOOD) == [(2, 2)]

    def test_clear(self):
        """clear() resets every cell to EMPTY."""
        grid = Grid(3, 3)
        grid.set(1, 1, Tile.SNAKE)
        grid.set(2, 0, Tile.FOOD)
        grid.clear()
        assert grid.count(Tile.EMPTY) == 9

    def test_has_empty(self):
        """has_empty() turns False only once every cell is taken."""
        grid = Grid(2, 1)
        assert grid.has_empty() is True
        grid.set(0, 0, Tile.SNAKE)
        assert grid.has_empty() is True
        grid.set(1, 0, Tile.FOOD)
        assert grid.has_empty() is False

    def test_repr(self):
        assert "3x2" in repr(Grid(3, 2))
