"""
Logging configuration for Spur Search.

This module provides a consistent logging setup across all package modules.
It uses Rich for console output when running interactively.

Configuration:
    LOG_LEVEL environment variable controls the logging level.
    Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)

Usage:
    from spur_search.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Searching %d events", len(events))
"""

import logging
import os
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Package-level logger name
LOGGER_NAME = "spur_search"

# Default format for non-Rich handlers (e.g., file output)
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logging_configured = False


def _get_log_level() -> int:
    """
    Get log level from environment variable.

    Returns:
        Logging level constant (e.g., logging.INFO)
    """
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def configure_logging(
    level: Optional[int] = None,
    use_rich: bool = True,
) -> None:
    """
    Configure the package-level logger.

    Should be called once at application startup (e.g., in CLI main).
    Later calls are ignored.

    Args:
        level: Logging level. If None, reads from LOG_LEVEL env var.
        use_rich: Whether to use RichHandler for console output.
                  Set to False when output is being piped or redirected.
    """
    global _logging_configured

    if _logging_configured:
        return

    log_level = level if level is not None else _get_log_level()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()

    is_interactive = sys.stdout.isatty() and use_rich

    if is_interactive:
        console = Console(stderr=True)
        handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            # Messages carry raw event keys and record values
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
        )

    handler.setLevel(log_level)
    logger.addHandler(handler)

    # Prevent propagation to root logger
    logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the specified module.

    Returns a child of the package-level logger, configuring logging with
    default settings first if nobody has done so yet.

    Args:
        name: Module name, typically __name__ from the calling module.
              Names outside the package namespace are prefixed.

    Returns:
        Configured logger instance.
    """
    if not _logging_configured:
        configure_logging()

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """
    Change the level of the package logger and its handlers.

    Unlike ``configure_logging``, this also takes effect after logging has
    been configured, e.g. for a ``--verbose`` flag parsed after the
    modules holding module-level loggers were imported.
    """
    if not _logging_configured:
        configure_logging(level=level)
        return

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
