"""Shared fixtures for naming tests."""

from unittest.mock import MagicMock

import pytest

from xray_naming.config import NAME_OVERRIDE_ENVIRONMENT_VARIABLE_KEY, get_settings

SETTINGS_ENV_VARS = [
    NAME_OVERRIDE_ENVIRONMENT_VARIABLE_KEY,
    "XRAY_SEGMENT_NAME",
    "XRAY_NAMING_STRATEGY",
    "XRAY_RECOGNIZED_HOSTS",
    "XRAY_PROPERTIES",
    "SERVICE_ENV",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the host environment from leaking overrides into tests."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double for asserting on emitted events."""
    return MagicMock()
