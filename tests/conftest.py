"""Root conftest - shared test configuration."""

import os

import pytest

from storefront.config import get_settings

# Ensure tests don't pick up a developer's local overrides
for _key in ("STOREFRONT_LOG_LEVEL", "STOREFRONT_LOG_FORMAT"):
    os.environ.pop(_key, None)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """get_settings() is lru_cached; every test sees the current environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
