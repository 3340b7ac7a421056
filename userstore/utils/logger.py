"""Centralized logging configuration.

All modules should use ``get_logger(__name__)`` to obtain a logger instance.
"""

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_ROOT_LOGGER_NAME = "userstore"
_initialized = False


def _init_logging() -> None:
    """Configure the package logger once."""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(logging.INFO)
    root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A configured logging.Logger.
    """
    _init_logging()
    return logging.getLogger(name)


def set_log_level(level: str) -> None:
    """Set the level of every userstore logger (e.g. "DEBUG", "warning").

    Raises:
        ValueError: If level is not a known logging level name
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    _init_logging()
    logging.getLogger(_ROOT_LOGGER_NAME).setLevel(numeric)
