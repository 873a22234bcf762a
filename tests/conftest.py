"""
Pytest Configuration for READMIN Tests

Ensures proper import paths for the readmin package and provides
isolated registries so tests never share generated controllers.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path to ensure proper imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from readmin.core.namespace import Application
from readmin.core.registry import ControllerRegistry


@pytest.fixture
def registry():
    """Empty controller registry"""
    return ControllerRegistry()


@pytest.fixture
def site(registry):
    """Application writing into its own registry"""
    return Application(registry=registry)


@pytest.fixture(autouse=True)
def package_logger():
    """Restore the "readmin" logger after tests that configure it"""
    logger = logging.getLogger("readmin")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
