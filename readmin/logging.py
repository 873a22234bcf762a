"""
READMIN Logging Utilities

Every READMIN module logs through ``logging.getLogger(__name__)``, so all of
them sit under the "readmin" package logger. This module owns that logger:
its handler, its format and its level, which follows the active Config.

Usage:
    from readmin.config import DevConfig
    from readmin.logging import configure_logging

    configure_logging(DevConfig)    # DEBUG output for the whole package
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "readmin"

DEFAULT_FORMAT = '[%(asctime)s] %(levelname)-8s | %(name)s - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Level used when Config.VERBOSE_LOGGING is off
QUIET_LEVEL = "WARNING"


def _level(name: str) -> int:
    return getattr(logging, name.upper())


def get_logger(name: str = PACKAGE_LOGGER, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with a stdout handler attached.

    The handler is attached on the first call for ``name`` only; later
    calls just return the logger (and apply ``level`` if given).
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(handler)

    if level is not None:
        logger.setLevel(_level(level))
    return logger


def configure_logging(config) -> logging.Logger:
    """
    Apply a Config class to the package logger.

    LOG_LEVEL is used while VERBOSE_LOGGING is on; otherwise only warnings
    and errors (ignored overrides, replaced controllers) get through.
    Existing package handlers are replaced, so the new handler writes to the
    current ``sys.stdout``.

    Args:
        config: Config class (Config, DevConfig, ProdConfig or a subclass)

    Returns:
        The "readmin" logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    level = config.LOG_LEVEL if config.VERBOSE_LOGGING else QUIET_LEVEL
    return get_logger(PACKAGE_LOGGER, level=level)


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    date_format: Optional[str] = None
):
    """
    Configure the root logger for a whole application embedding READMIN.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom log format
        date_format: Custom date format
    """
    logging.basicConfig(
        level=_level(level),
        format=format_string or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT,
        stream=sys.stdout,
        force=True  # Reset any existing configuration
    )


__all__ = [
    'get_logger',
    'configure_logging',
    'setup_logging',
]
