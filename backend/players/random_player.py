"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional, Set, Tuple

from domain.constants import Direction, MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls, self-collisions and
    reversals.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def safe_moves(self, game_state: GameState) -> List[Direction]:
        head = game_state.head
        blocked: Set[Tuple[int, int]] = set(game_state.body)

        # The oldest body cell is freed before the collision check when the
        # snake is not growing this tick
        if len(game_state.trail) + 1 >= game_state.size:
            blocked.discard(game_state.body[0])

        valid_moves: List[Direction] = []
        for move in MOVES:
            # Reversals are ignored by the snake, so they would keep the old direction
            if move.opposite(game_state.direction):
                continue

            new_x, new_y = move.step(head)
            # Check wall collisions
            if not game_state.in_bounds(new_x, new_y):
                continue

            # Check self collisions
            if (new_x, new_y) in blocked:
                continue

            valid_moves.append(move)

        return valid_moves

    def get_move(self, game_state: GameState) -> Direction:
        valid_moves = self.safe_moves(game_state)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            if game_state.direction == Direction.NONE:
                return self.rng.choice(MOVES)
            return game_state.direction

        return self.rng.choice(valid_moves)
