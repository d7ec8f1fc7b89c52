"""
Runtime settings for termsnake, read from the environment (and .env).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FILE = os.path.join(tempfile.gettempdir(), "termsnake.log")
DEFAULT_TICK_MS = 100

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str = DEFAULT_LOG_FILE
    tick_ms: int = DEFAULT_TICK_MS
    seed: Optional[int] = None
    continuous: bool = False

    @property
    def tick_interval(self) -> float:
        return self.tick_ms / 1000.0


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %s.", name, raw, default)
        return default


def load_settings() -> Settings:
    """
    Build Settings from SNAKE_* environment variables.

    Invalid numbers fall back to their defaults with a warning.
    """
    tick_ms = _int_from_env("SNAKE_TICK_MS", DEFAULT_TICK_MS)
    if tick_ms <= 0:
        logger.warning("SNAKE_TICK_MS=%s is invalid; defaulting to %s.", tick_ms, DEFAULT_TICK_MS)
        tick_ms = DEFAULT_TICK_MS

    return Settings(
        log_level=os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        log_file=os.getenv("SNAKE_LOG_FILE") or DEFAULT_LOG_FILE,
        tick_ms=tick_ms,
        seed=_int_from_env("SNAKE_SEED", None),
        continuous=os.getenv("SNAKE_CONTINUOUS", "false").strip().lower() in TRUTHY,
    )
