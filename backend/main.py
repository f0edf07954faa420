#!/usr/bin/env python3
"""
Play snake in the terminal.

Usage:
    python main.py
    python main.py --width 20 --height 15 --delay 80

Board size and speed default to the SNAKE_* environment variables (see
config.py). Arrow keys turn, Backspace / q / Esc quits.
"""

import argparse
import curses
import logging
from typing import List, Optional

from config import Settings, configure_logging, load_settings
from domain.game import Game
from services.terminal_host import TerminalHost

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play snake in the terminal.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--width", type=int, default=settings.width,
                        help=f"Width of the board (default: {settings.width})")
    parser.add_argument("--height", type=int, default=settings.height,
                        help=f"Height of the board (default: {settings.height})")
    parser.add_argument("--delay", type=int, default=settings.tick_delay_ms,
                        help=f"Delay between moves in milliseconds (default: {settings.tick_delay_ms})")
    parser.add_argument("--log-file", type=str, default=settings.log_file,
                        help="Write logs to this file (the screen is used by the game)")
    return parser


def run_game(width: int, height: int, delay_ms: int) -> Game:
    """Run one terminal game and return the finished game."""
    game = Game(width, height)
    host = TerminalHost(game, tick_delay=delay_ms / 1000.0)
    curses.wrapper(host.run)
    return game


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        raise ValueError(f"Board dimensions must be positive, got {args.width}x{args.height}.")
    if args.delay <= 0:
        raise ValueError(f"Delay must be positive, got {args.delay}.")

    if args.log_file:
        configure_logging(settings.log_level, filename=args.log_file)
    else:
        # Anything on stderr would scribble over the board
        configure_logging("WARNING")

    logger.info(f"Starting {args.width}x{args.height} game with {args.delay}ms delay.")
    game = run_game(args.width, args.height, args.delay)

    result = "won" if game.won else "over"
    print(f"Game {result}. Score: {game.score}, ticks: {game.ticks}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
