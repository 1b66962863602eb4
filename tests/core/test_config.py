"""Unit tests for knight_puzzles/core/config.py and knight_puzzles/core/logger.py"""

import logging

import pytest

from knight_puzzles.core.config import (
    DEFAULT_DATABASE_URL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_RATING,
    Settings,
    get_settings,
)
from knight_puzzles.core.logger import ROOT_LOGGER_NAME, get_logger


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DATABASE_URL", "DEFAULT_RATING", "LOG_LEVEL"):
        monkeypatch.delenv(f"KNIGHT_PUZZLES_{name}", raising=False)
    assert get_settings() == Settings(
        database_url=DEFAULT_DATABASE_URL,
        default_rating=DEFAULT_RATING,
        log_level=DEFAULT_LOG_LEVEL,
    )


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KNIGHT_PUZZLES_DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("KNIGHT_PUZZLES_DEFAULT_RATING", "2100")
    monkeypatch.setenv("KNIGHT_PUZZLES_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.database_url == "sqlite:///:memory:"
    assert settings.default_rating == 2100
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("level", ["verbose", "", "12"])
def test_unknown_log_level_falls_back_to_default(
    monkeypatch: pytest.MonkeyPatch, level: str
) -> None:
    monkeypatch.setenv("KNIGHT_PUZZLES_LOG_LEVEL", level)
    settings = get_settings()
    assert settings.log_level == DEFAULT_LOG_LEVEL
    # accepted by the logging module
    logging.getLogger("knight_puzzles.tests.level").setLevel(settings.log_level)


def test_loggers_live_under_package_namespace() -> None:
    logger = get_logger("knight_puzzles.services.puzzle_service")
    assert logger.name == "knight_puzzles.services.puzzle_service"
    assert get_logger("scripts").name == f"{ROOT_LOGGER_NAME}.scripts"
    assert get_logger() is logging.getLogger(ROOT_LOGGER_NAME)


def test_root_logger_has_single_handler() -> None:
    get_logger("a")
    get_logger("b")
    assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1
