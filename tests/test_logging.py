"""
Unit tests for logging helpers
"""

import logging
import sys

from readmin.config import Config, DevConfig
from readmin.logging import configure_logging, get_logger, setup_logging


class QuietConfig(Config):
    VERBOSE_LOGGING = False
    LOG_LEVEL = "DEBUG"


def test_get_logger_configures_once():
    """Test get_logger attaches a single handler"""
    logger = get_logger("readmin.tests.once", level="DEBUG")
    again = get_logger("readmin.tests.once")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_configure_logging_uses_log_level(package_logger):
    """Test the package logger follows Config.LOG_LEVEL"""
    logger = configure_logging(DevConfig)

    assert logger is package_logger
    assert logger.level == logging.DEBUG

    configure_logging(Config)
    assert logger.level == logging.INFO


def test_configure_logging_quiet_when_not_verbose(package_logger):
    """Test VERBOSE_LOGGING=False keeps only warnings and errors"""
    logger = configure_logging(QuietConfig)

    assert logger.level == logging.WARNING
    assert logging.getLogger("readmin.core.namespace").getEffectiveLevel() == logging.WARNING


def test_configure_logging_replaces_handler(package_logger):
    """Test repeated configuration keeps one handler bound to the current stdout"""
    configure_logging(Config)
    configure_logging(Config)

    assert len(package_logger.handlers) == 1
    assert package_logger.handlers[0].stream is sys.stdout


def test_setup_logging_sets_root_level():
    """Test setup_logging configures the root logger"""
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, list(root.handlers)
    try:
        setup_logging(level="WARNING")
        assert root.level == logging.WARNING
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)
