"""Root conftest — shared test configuration."""

import os

import pytest

from gcd_app.config import get_settings

# Keep a developer's .env/environment from changing logging during tests
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
