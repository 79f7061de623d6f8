"""Structured logging configuration for deadswitch.

Provides dual output strategy:
- console.print() for user-facing CLI messages (Rich formatting)
- logging module for the service log (arming, removals, failures)

Usage:
    from deadswitch.logging import get_logger
    logger = get_logger(__name__)
    logger.info("Removing file: %s", path)

Log level is resolved from:
    - CLI flag: deadswitch --debug
    - Environment: DEADSWITCH_DEBUG=1 (DEBUG)
    - Environment: DEADSWITCH_LOG_LEVEL=warning (any stdlib level name)
    - Default: INFO, so every removal is recorded
"""

from __future__ import annotations

import logging
import os
import sys

ROOT_LOGGER_NAME = "deadswitch"

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}
_initialized = False

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FORMAT_DEBUG = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d [%(threadName)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _get_log_level() -> int:
    """Determine log level from environment."""
    if os.environ.get("DEADSWITCH_DEBUG", "").lower() in ("1", "true", "yes"):
        return logging.DEBUG

    name = os.environ.get("DEADSWITCH_LOG_LEVEL", "").upper()
    level = logging.getLevelName(name) if name else logging.INFO
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.INFO


def _formatter(level: int) -> logging.Formatter:
    return logging.Formatter(
        LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )


def _init_logging() -> None:
    """Initialize logging configuration (called once)."""
    global _initialized
    if _initialized:
        return

    level = _get_log_level()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    # Only add handler if none exist (avoid duplicate handlers)
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(_formatter(level))
        root_logger.addHandler(handler)

    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Module name (typically __name__).

    Returns:
        Logger inside the deadswitch namespace.
    """
    _init_logging()

    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]


def set_level(level: int) -> None:
    """Apply a log level to the deadswitch logger and its handlers."""
    _init_logging()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        handler.setLevel(level)
        handler.setFormatter(_formatter(level))


def set_debug(enabled: bool = True) -> None:
    """Enable or disable debug logging.

    Called by CLI when --debug flag is used. Disabling falls back to INFO.
    """
    set_level(logging.DEBUG if enabled else logging.INFO)
