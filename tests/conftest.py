"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset checkmark loggers after each test so handlers do not leak between tests.

    Loggers stay registered: module-level loggers such as
    ``checkmark.conditions.stateful`` keep a reference to their parent.
    """
    yield

    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not name.startswith("checkmark") or not isinstance(logger, logging.Logger):
            continue
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def shorter_than():
    """Predicate comparing the length of the given value to the expected size."""
    return lambda given, expected: len(given) < expected
