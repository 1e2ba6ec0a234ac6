"""Root conftest — shared test configuration."""

import os

import pytest

from demo_api.config import get_settings
from demo_api.services.catalog import reset_catalog

# Human-readable logs in test output
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture(autouse=True)
def _fresh_process_state():
    """Every test starts with no cached settings and no seeded catalog."""
    get_settings.cache_clear()
    reset_catalog()
    yield
    get_settings.cache_clear()
    reset_catalog()
