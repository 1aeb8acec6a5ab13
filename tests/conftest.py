"""Shared fixtures for the spaceship console tests."""

import io
import random
from unittest.mock import Mock

import pytest
from loguru import logger

from spaceship.console import Session, StreamSink


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging setup done by the CLI during a test."""
    yield
    logger.remove()
    logger.disable("spaceship")


@pytest.fixture
def scripted_rng():
    """Random generator whose draws are set per test via random.side_effect."""
    return Mock(spec=random.Random)


@pytest.fixture
def output():
    """In-memory stream collecting primary console output."""
    return io.StringIO()


@pytest.fixture
def session(output, scripted_rng):
    """Console session writing to the in-memory output."""
    return Session(out=StreamSink(output), rng=scripted_rng)
