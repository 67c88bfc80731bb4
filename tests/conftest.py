"""Pytest configuration and fixtures."""

import logging
import sys
from enum import IntEnum
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class NewerStatusCode(IntEnum):
    """Code set from a newer API release with a member this package predates."""

    UNSET = 0
    OK = 1
    ERROR = 2
    CANCELLED = 3


@pytest.fixture
def newer_codes():
    """Code enumeration with an extra member."""
    return NewerStatusCode


@pytest.fixture
def registry():
    """Create a registry over the default code set."""
    from spanstatus.registry import StatusRegistry

    return StatusRegistry()


@pytest.fixture
def factory(registry):
    """Create a factory bound to the registry fixture."""
    from spanstatus.factory import StatusFactory

    return StatusFactory(registry)


@pytest.fixture
def restore_package_logger():
    """Restore the spanstatus logger after setup_logging() reconfigures it."""
    package_logger = logging.getLogger("spanstatus")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
