"""Shared test fixtures for the widget test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from shared.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop the cached Settings so environment tweaks in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_weather_client_cls():
    """Factory for a patched ``WeatherClient`` class whose instances return ``payload``."""

    def _factory(payload=None, side_effect=None):
        instance = MagicMock()
        instance.get_current_weather = AsyncMock(return_value=payload, side_effect=side_effect)
        return MagicMock(return_value=instance), instance

    return _factory
