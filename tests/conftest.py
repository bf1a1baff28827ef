"""Root pytest configuration for all tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers the CLI attaches so tests do not share log output."""
    yield
    app_logger = logging.getLogger("telegraph_content")
    app_logger.handlers.clear()
    app_logger.setLevel(logging.NOTSET)
