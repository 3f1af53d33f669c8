"""Shared pytest fixtures for multimaps tests."""

import logging

import pytest

from multimaps.array_map import ArrayMap
from multimaps.logging import MULTIMAPS_ROOT_LOGGER, enable
from multimaps.set_map import SetMap


@pytest.fixture
def array_map():
    """Create an empty ArrayMap."""
    return ArrayMap()


@pytest.fixture
def populated_array_map():
    """Create an ArrayMap holding {a: ['a', 'b'], b: ['c']}."""
    mm = ArrayMap()
    mm.set("a", ["a", "b"])
    mm.set("b", ["c"])
    return mm


@pytest.fixture
def set_map():
    """Create an empty SetMap."""
    return SetMap()


@pytest.fixture
def populated_set_map():
    """Create a SetMap holding {a: {'a', 'b'}, b: {'c'}}."""
    mm = SetMap()
    mm.set("a", {"a", "b"})
    mm.set("b", {"c"})
    return mm


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the multimaps root logger after each test."""
    logger = logging.getLogger(MULTIMAPS_ROOT_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    disabled = logger.disabled
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    enable()
    logger.setLevel(level)
    logger.disabled = disabled
