"""
Runtime settings for the snake host loops.

Values come from environment variables (optionally loaded from a .env file):
- SNAKE_WIDTH: grid width (default 30)
- SNAKE_HEIGHT: grid height (default 30)
- SNAKE_TICK_DELAY_MS: delay between ticks in milliseconds (default 100)
- SNAKE_LOG_LEVEL: logging level name (default INFO)
- SNAKE_LOG_FILE: file the terminal host logs to (default unset)
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_WIDTH = 30
DEFAULT_HEIGHT = 30
DEFAULT_TICK_DELAY_MS = 100
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class Settings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    tick_delay_ms: int = DEFAULT_TICK_DELAY_MS
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    @property
    def tick_delay(self) -> float:
        """Delay between ticks in seconds."""
        return self.tick_delay_ms / 1000.0


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _log_level(raw: Optional[str]) -> str:
    level = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"SNAKE_LOG_LEVEL is not a logging level: {raw!r}")
    return level


def load_settings(load_env_file: bool = True) -> Settings:
    """
    Build Settings from the environment.

    Raises:
        ValueError: If a variable holds an invalid value
    """
    if load_env_file:
        load_dotenv()

    log_file = os.getenv("SNAKE_LOG_FILE", "").strip() or None

    return Settings(
        width=_positive_int("SNAKE_WIDTH", DEFAULT_WIDTH),
        height=_positive_int("SNAKE_HEIGHT", DEFAULT_HEIGHT),
        tick_delay_ms=_positive_int("SNAKE_TICK_DELAY_MS", DEFAULT_TICK_DELAY_MS),
        log_level=_log_level(os.getenv("SNAKE_LOG_LEVEL")),
        log_file=log_file,
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL, filename: Optional[str] = None) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, filename=filename)
