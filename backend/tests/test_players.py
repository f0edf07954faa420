"""
Tests for players/ - the automatic snake drivers.
"""

import pytest
import random
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import Direction, State, MOVES
from domain.game import Game
from domain.game_state import GameState
from players import Player, RandomPlayer


def make_state(head, trail, direction, size=3, width=3, height=3):
    return GameState(
        state=State.RUNNING,
        width=width,
        height=height,
        head=head,
        direction=direction,
        size=size,
        trail=trail,
        food=None,
    )


class TestPlayer:
    """Tests for the Player base class."""

    def test_get_move_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state((1, 1), [], Direction.NONE))


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_falsy_random_source_is_kept(self):
        class SizedRandom(random.Random):
            def __len__(self):
                return 0

        rng = SizedRandom(0)
        assert RandomPlayer(rng=rng).rng is rng

    def test_any_move_from_standstill(self):
        """A snake that has not moved yet may go any way."""
        player = RandomPlayer(rng=random.Random(0))
        state = make_state((1, 1), [], Direction.NONE)
        assert set(player.safe_moves(state)) == set(MOVES)

    def test_avoids_walls_and_reversal(self):
        """In a corner facing UP, RIGHT is the only safe move."""
        player = RandomPlayer(rng=random.Random(1))
        state = make_state((0, 0), [(0, 1)], Direction.UP)

        for _ in range(20):
            assert player.get_move(state) == Direction.RIGHT

    def test_avoids_body(self):
        """Cells still covered by the body next tick are avoided."""
        player = RandomPlayer(rng=random.Random(2))
        state = make_state((1, 1), [(0, 0), (1, 0), (2, 0), (2, 1)], Direction.LEFT, size=5)
        assert set(player.safe_moves(state)) == {Direction.LEFT, Direction.DOWN}

    def test_tail_cell_is_free_when_not_growing(self):
        """The oldest body cell is freed this tick, so moving into it is safe."""
        player = RandomPlayer(rng=random.Random(3))
        state = make_state((1, 1), [(1, 0), (2, 0), (2, 1)], Direction.LEFT, size=4)
        assert set(player.safe_moves(state)) == {Direction.LEFT, Direction.UP, Direction.DOWN}

    def test_no_safe_move_keeps_direction(self):
        """When every move is fatal the player keeps going straight."""
        player = RandomPlayer(rng=random.Random(4))
        state = make_state((0, 0), [(1, 0), (1, 1), (0, 1)], Direction.UP, size=5, width=2, height=2)
        assert player.safe_moves(state) == []
        assert player.get_move(state) == Direction.UP

    def test_drives_a_game_without_reversing(self):
        """Every move handed to the engine is actually taken."""
        rng = random.Random(5)
        game = Game(8, 8, rng=rng)
        player = RandomPlayer(rng=rng)

        for _ in range(30):
            if game.state == State.GAME_OVER:
                break
            move = player.get_move(game.get_current_state())
            game.turn_snake(move)
            assert game.snake.direction == move
            game.move_snake()
