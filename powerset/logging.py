"""Logging for powerset.

All package loggers hang under the ``powerset`` logger, which owns the only
handler. Records go to stderr; stdout is reserved for the printed power set.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "powerset"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler to the ``powerset`` logger.

    Does nothing after the first call until ``reset_logging`` runs.

    Args:
        level: Initial level of the package logger.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Handler to install; defaults to a stderr StreamHandler.
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # pytest's caplog listens on the root logger
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger ``name`` with its level left to the package logger."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set ``level`` on the package logger and on its handlers."""
    setup_root_logger()

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def configure_cli_logging(verbose: bool = False, quiet: bool = False) -> int:
    """Apply the level selected by the ``--verbose``/``--quiet`` switches.

    ``verbose`` wins when both are set.

    Returns:
        The level that was applied.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    set_global_log_level(level)
    return level


def reset_logging() -> None:
    """Drop the package handler and level (used by tests)."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
