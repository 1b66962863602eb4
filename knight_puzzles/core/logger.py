"""Logger configuration shared by all layers."""

import logging
import sys

from knight_puzzles.core.config import get_settings

ROOT_LOGGER_NAME = "knight_puzzles"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_handler = logging.StreamHandler(sys.stdout)
_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def _configure_root() -> logging.Logger:
    """Attach the stdout handler once. Child loggers propagate to this one."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        root.addHandler(_handler)
        root.setLevel(get_settings().log_level)
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the package namespace, e.g. get_logger(__name__) in a module."""
    root = _configure_root()
    if name is None or name == ROOT_LOGGER_NAME:
        return root
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
