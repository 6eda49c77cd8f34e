"""Global pytest configuration."""

import pytest

from tripcal.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> None:
    """Drop cached settings so env overrides in one test never leak into another."""
    get_settings.cache_clear()
