"""Root pytest configuration for all tests.

This conftest applies to all test types (unit and integration).
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_src_logger():
    """Drop handlers the CLI attaches to the 'src' logger between tests."""
    yield
    src_logger = logging.getLogger("src")
    src_logger.handlers.clear()
    src_logger.setLevel(logging.NOTSET)
