"""Pytest configuration and fixtures."""

import logging

import pytest

from matchbook.matchers import squares
from matchbook.registry import MatcherRegistry


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up matchbook run loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("matchbook_")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def registry() -> MatcherRegistry:
    """Fresh, unfrozen registry holding the square matchers."""
    reg = MatcherRegistry()
    squares.register(reg)
    return reg


@pytest.fixture
def default_registry(monkeypatch) -> MatcherRegistry:
    """Swap the process-wide registry for an empty one for the test's duration."""
    reg = MatcherRegistry()
    monkeypatch.setattr("matchbook.registry.default_registry", reg)
    monkeypatch.setattr("matchbook.expectations.default_registry", reg)
    return reg
