"""Pytest configuration and shared fixtures."""

import logging
import tempfile
from pathlib import Path

import pytest

from textamender.transforms import Category, Transform, default_registry

PIPES_DIR = Path(__file__).parent.parent / "examples" / "pipes"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def pipes_dir():
    """Directory holding the example pipe files."""
    return PIPES_DIR


@pytest.fixture(scope="session")
def registry():
    """Registry holding the built-in catalog."""
    return default_registry()


def make_transform(key, operation=None, category=Category.STRINGS, name=None):
    """Build a throwaway transform for pipeline tests."""
    return Transform(
        name=name or key,
        key=key,
        description=f"test transform {key}",
        category=category,
        operation=operation or (lambda text: text),
    )


@pytest.fixture
def append_a():
    return make_transform("append-a", lambda text: text + "a")


@pytest.fixture
def append_b():
    return make_transform("append-b", lambda text: text + "b")


@pytest.fixture
def double():
    return make_transform("double", lambda text: text * 2)


@pytest.fixture
def transform_factory():
    """Factory for throwaway transforms: transform_factory(key, operation=None, ...)."""
    return make_transform


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the package logger after each test; CLI runs reconfigure it."""
    logger = logging.getLogger("textamender")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers
