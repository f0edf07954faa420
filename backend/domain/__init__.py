"""
Domain entities for the snake game engine.

This module contains the core game entities: the grid, the snake and the
engine that applies one tick at a time. They are independent of any host
concerns (terminal, input capture, pacing).
"""

from .constants import Direction, Tile, State, MOVES, INITIAL_SNAKE_SIZE
from .grid import Grid
from .snake import Snake
from .game_state import GameState
from .game import Game

__all__ = [
    'Direction', 'Tile', 'State', 'MOVES', 'INITIAL_SNAKE_SIZE',
    'Grid',
    'Snake',
    'GameState',
    'Game',
]
