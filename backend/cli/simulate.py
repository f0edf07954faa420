#!/usr/bin/env python3
"""
Play headless snake games with the random player and print a JSON summary.

Usage:
    python simulate.py
    python simulate.py --games 20 --width 10 --height 10 --seed 42

Each game runs until it is over or --max-ticks moves were made. The summary
lists every game (ticks, score, final size, end reason) plus the mean and
best score across all games.
"""

import os
import sys
import json
import argparse
import logging
import random
from typing import Any, Dict, List, Optional

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import configure_logging, load_settings
from domain.constants import State
from domain.game import Game
from players import Player, RandomPlayer

logger = logging.getLogger(__name__)

DEFAULT_GAMES = 10
DEFAULT_MAX_TICKS = 1000


def play_game(game: Game, player: Player, max_ticks: int) -> Dict[str, Any]:
    """
    Drive `game` with `player` until it is over or `max_ticks` moves were made.

    Returns a dictionary summarizing the game.
    """
    game.state = State.RUNNING

    while game.state != State.GAME_OVER and game.ticks < max_ticks:
        game.turn_snake(player.get_move(game.get_current_state()))
        game.move_snake()

    if game.won:
        reason = "board_full"
    elif game.state == State.GAME_OVER:
        reason = "collision"
    else:
        reason = "max_ticks"

    return {
        "ticks": game.ticks,
        "score": game.score,
        "size": game.size,
        "won": game.won,
        "end_reason": reason,
    }


def run_simulation(num_games: int, width: int, height: int, max_ticks: int,
                   seed: Optional[int] = None) -> Dict[str, Any]:
    """
    Play `num_games` games with RandomPlayer on a `width` x `height` board.

    A seed makes the whole run reproducible: it seeds both the food placement
    and the player's choices.
    """
    if num_games <= 0:
        raise ValueError(f"Number of games must be positive, got {num_games}.")
    if max_ticks <= 0:
        raise ValueError(f"max_ticks must be positive, got {max_ticks}.")

    rng = random.Random(seed)
    game = Game(width, height, rng=rng)
    player = RandomPlayer(rng=rng)

    games: List[Dict[str, Any]] = []
    for index in range(num_games):
        if index > 0:
            game.restart()
        result = play_game(game, player, max_ticks)
        result["game"] = index
        games.append(result)
        logger.info(
            f"Game {index}: score {result['score']} in {result['ticks']} ticks ({result['end_reason']})"
        )

    scores = [g["score"] for g in games]
    return {
        "width": width,
        "height": height,
        "seed": seed,
        "games": games,
        "mean_score": sum(scores) / len(scores),
        "max_score": max(scores),
        "wins": sum(1 for g in games if g["won"]),
    }


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Play headless snake games with a random player",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--games", type=int, default=DEFAULT_GAMES,
                        help=f"Number of games to play (default: {DEFAULT_GAMES})")
    parser.add_argument("--width", type=int, default=settings.width,
                        help=f"Width of the board (default: {settings.width})")
    parser.add_argument("--height", type=int, default=settings.height,
                        help=f"Height of the board (default: {settings.height})")
    parser.add_argument("--max-ticks", type=int, default=DEFAULT_MAX_TICKS,
                        help=f"Stop a game after this many moves (default: {DEFAULT_MAX_TICKS})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for a reproducible run")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)

    summary = run_simulation(args.games, args.width, args.height, args.max_ticks, seed=args.seed)
    print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
