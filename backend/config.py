"""
Runtime settings for the snake engine.

Values come from the environment (a local .env file is loaded first), and
command-line flags in main.py override them.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import DEFAULT_ROWS, DEFAULT_COLS, DEFAULT_TICK_RATE_MS


TRUTHY = {"1", "true", "yes", "on"}
FALSY = {"0", "false", "no", "off", ""}


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in TRUTHY:
        return True
    if value in FALSY:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false, yes/no, on/off), got {raw!r}")


@dataclass
class EngineSettings:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    tick_rate: float = DEFAULT_TICK_RATE_MS
    borders: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "EngineSettings":
        """
        Build settings from SNAKE_ROWS, SNAKE_COLS, SNAKE_TICK_RATE_MS,
        SNAKE_BORDERS and LOG_LEVEL.
        """
        load_dotenv(dotenv_path)
        return cls(
            rows=_int_env("SNAKE_ROWS", DEFAULT_ROWS),
            cols=_int_env("SNAKE_COLS", DEFAULT_COLS),
            tick_rate=_float_env("SNAKE_TICK_RATE_MS", DEFAULT_TICK_RATE_MS),
            borders=_bool_env("SNAKE_BORDERS", False),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
