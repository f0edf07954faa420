"""
Terminal front end for the snake engine.

Draws the grid with curses, reads arrow keys on a background thread and
paces the game with a fixed delay between ticks.

Controls:
    Arrow keys           turn
    Backspace / q / Esc  quit
"""

import curses
import logging
import threading
import time
from typing import List, Optional

from domain.constants import Direction, State, Tile
from domain.game import Game
from domain.grid import Grid
from .input_channel import DirectionChannel

logger = logging.getLogger(__name__)

BORDER_SYMBOL = "#"
TILE_SYMBOLS = {
    Tile.EMPTY: " ",
    Tile.SNAKE: "O",
    Tile.FOOD: "@",
}

KEY_BINDINGS = {
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    # Quit keys map to NONE, which the tick loop treats as "stop"
    curses.KEY_BACKSPACE: Direction.NONE,
    127: Direction.NONE,
    8: Direction.NONE,
    27: Direction.NONE,
    ord("q"): Direction.NONE,
}

# How often the input thread polls for keys, in seconds
INPUT_POLL_INTERVAL = 0.01


def key_to_direction(key: int) -> Optional[Direction]:
    """Map a curses key code to a Direction, or None for unbound keys."""
    return KEY_BINDINGS.get(key)


def render_lines(grid: Grid) -> List[str]:
    """
    Project the grid onto text lines, framed by a border.

    Cells are separated by a space so the board looks roughly square in a
    terminal.
    """
    game_width = grid.width * 2 + 2
    border = BORDER_SYMBOL * game_width

    lines = [border]
    for y in range(grid.height):
        symbols = [TILE_SYMBOLS[grid.get(x, y)] for x in range(grid.width)]
        lines.append(BORDER_SYMBOL + " ".join(symbols) + " " + BORDER_SYMBOL)
    lines.append(border)
    return lines


def pick_direction(current: Direction, inputs: List[Direction]) -> Optional[Direction]:
    """
    Choose which of the inputs received during one tick to act on.

    A quit (NONE) wins over everything. Otherwise the most recent input that
    is not a reversal of `current` is taken, so a quick turn followed by a
    reversal key still turns the snake.
    """
    if Direction.NONE in inputs:
        return Direction.NONE
    for direction in reversed(inputs):
        if not current.opposite(direction):
            return direction
    return None


def host_tick(game: Game, channel: DirectionChannel) -> bool:
    """
    Apply this tick's input and advance the game by one tick.

    A NONE input ends the game. Any other usable input unpauses the game and
    turns the snake. Returns True if the snake moved.
    """
    direction = pick_direction(game.snake.direction, channel.drain())
    if direction is not None:
        if direction == Direction.NONE:
            logger.info("Quit requested.")
            game.game_over()
        elif game.state != State.GAME_OVER:
            game.state = State.RUNNING
            game.turn_snake(direction)

    if game.state == State.RUNNING:
        game.move_snake()
        return True
    return False


class TerminalHost:
    """Runs one game of snake in a curses screen."""

    def __init__(self, game: Game, tick_delay: float, channel: Optional[DirectionChannel] = None):
        self.game = game
        self.tick_delay = tick_delay
        self.channel = channel if channel is not None else DirectionChannel()
        self._stop = threading.Event()
        # curses is not thread-safe; the input thread and the drawing loop share this
        self._screen_lock = threading.Lock()
        self._cols = 0

    def run(self, screen) -> None:
        """Play until the game is over. Meant to be called through curses.wrapper()."""
        self._check_screen_size(screen)
        try:
            curses.curs_set(0)
        except curses.error:
            # Not every terminal can hide the cursor
            logger.debug("Cursor visibility not supported.")
        screen.keypad(True)
        screen.nodelay(True)

        input_thread = threading.Thread(
            target=self._capture_inputs, args=(screen,), name="snake-input", daemon=True
        )
        input_thread.start()

        try:
            self._draw(screen)
            while self.game.state != State.GAME_OVER:
                if host_tick(self.game, self.channel):
                    self._draw(screen)
                time.sleep(self.tick_delay)
        finally:
            self._stop.set()
            input_thread.join()

        self._show_game_over(screen)

    def _capture_inputs(self, screen) -> None:
        while not self._stop.is_set():
            with self._screen_lock:
                key = screen.getch()

            if key == -1:
                time.sleep(INPUT_POLL_INTERVAL)
                continue

            direction = key_to_direction(key)
            if direction is None:
                continue

            self.channel.send(direction)
            if direction == Direction.NONE:
                return

    def _check_screen_size(self, screen) -> None:
        rows, cols = screen.getmaxyx()
        needed_rows = self.game.height + 4
        needed_cols = self.game.width * 2 + 3
        if rows < needed_rows or cols < needed_cols:
            raise ValueError(
                f"Terminal too small: need {needed_cols}x{needed_rows}, got {cols}x{rows}."
            )
        self._cols = cols

    def _addstr(self, screen, row: int, col: int, text: str, attr: int = 0) -> None:
        # Writing into the last column moves the cursor off screen and errors
        screen.addstr(row, col, text[: max(0, self._cols - 1 - col)], attr)

    def _draw(self, screen) -> None:
        lines = self.game.display(render_lines)
        status = f"Score: {self.game.score}  Ticks: {self.game.ticks}"
        if self.game.state == State.PAUSED:
            status += "  (press an arrow key to start)"

        with self._screen_lock:
            screen.erase()
            for row, line in enumerate(lines):
                self._addstr(screen, row, 0, line)
            self._addstr(screen, len(lines), 0, status)
            screen.refresh()

    def _show_game_over(self, screen) -> None:
        self._draw(screen)
        message = "You won!" if self.game.won else "Game Over!"
        row = self.game.height + 3

        self._addstr(screen, row, 0, message, curses.A_BOLD)
        screen.refresh()
        time.sleep(1)

        self._addstr(screen, row, len(message) + 1, "Press any key to continue ...")
        screen.nodelay(False)
        screen.getch()
