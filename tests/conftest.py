"""Pytest configuration and fixtures."""

import pytest

from core.settings import get_app_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings for every test so env overrides do not leak."""
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()
