"""Pytest configuration and fixtures for mathcli tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_mathcli_logger():
    """Reset the mathcli package logger before and after each test.

    CLI invocations install a Rich handler and set a level on the package
    logger. Without this, level and handlers leak between tests.
    """
    logger = logging.getLogger("mathcli")

    def _reset() -> None:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()
