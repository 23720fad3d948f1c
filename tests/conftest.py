"""Pytest fixtures for pyemitter tests."""

import logging
from unittest.mock import MagicMock

import pytest

from pyemitter.lib.events import EventEmitter


@pytest.fixture
def emitter():
    """Create an empty EventEmitter."""
    return EventEmitter()


@pytest.fixture
def spy():
    """A named mock listener."""
    return MagicMock(name="listener")


@pytest.fixture
def spy2():
    """A second named mock listener."""
    return MagicMock(name="listener2")


@pytest.fixture
def restore_logging():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        # pytest manages its own capture handlers per test phase
        if handler not in root.handlers and not type(handler).__module__.startswith("_pytest"):
            root.addHandler(handler)
    root.setLevel(level)
