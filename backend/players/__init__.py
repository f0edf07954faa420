"""
Player implementations for the snake engine.

Players decide which way the snake turns; hosts without a human at the
keyboard (such as the simulation CLI) use them to drive the game.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
