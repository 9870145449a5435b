"""
Global pytest configuration and fixtures for all tests.

Provides:
- Environment isolation for CUSTOM_TYPE_* settings
- Package logger level switching
"""

import os

import pytest

from custom_type.core.config import ENV_PREFIX, get_settings
from custom_type.core.logging import LogConfig, configure_logging


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against default settings."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    get_settings.cache_clear()

    yield

    # .env loading writes straight into os.environ
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            del os.environ[key]
    get_settings.cache_clear()


@pytest.fixture
def debug_logging():
    """Enable debug level logging for the duration of a test."""
    from custom_type.core.enums import Environment, LogLevel

    configure_logging(
        LogConfig(level=LogLevel.DEBUG, environment=Environment.TESTING),
        configure_structlog=False,
    )
    yield
    configure_logging(LogConfig(), configure_structlog=False)
