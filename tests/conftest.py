"""Shared fixtures."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logging configuration bound to streams captured by a previous test."""
    yield
    structlog.reset_defaults()
