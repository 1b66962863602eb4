"""Application settings, read from the environment."""

import os
from dataclasses import dataclass

ENV_PREFIX = "KNIGHT_PUZZLES_"
DEFAULT_DATABASE_URL = "sqlite:///knight_puzzles.db"
DEFAULT_RATING = 1500
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _env(name: str, default: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _log_level() -> str:
    """Unknown level names fall back to the default level"""
    level = _env("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class Settings:
    """Central configuration. Build it with get_settings() so environment overrides are picked up."""

    database_url: str = DEFAULT_DATABASE_URL
    default_rating: int = DEFAULT_RATING
    log_level: str = DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    """Settings with environment overrides applied, e.g. KNIGHT_PUZZLES_DATABASE_URL"""
    return Settings(
        database_url=_env("DATABASE_URL", DEFAULT_DATABASE_URL),
        default_rating=int(_env("DEFAULT_RATING", str(DEFAULT_RATING))),
        log_level=_log_level(),
    )
