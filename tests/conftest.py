"""Shared fixtures for all tests."""

from collections.abc import Generator

import pytest

from streamfeed import StreamConfig


@pytest.fixture
def mock_env_clear(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear all Stream-related environment variables for testing.

    This ensures tests don't accidentally use real credentials from the environment.
    """
    env_vars_to_clear = [
        "STREAM_API_KEY",
        "STREAM_API_SECRET",
        "STREAM_BASE_URL",
        "STREAM_REGION",
        "STREAM_TIMEOUT",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def mock_key() -> str:
    """Mock Stream API key for testing."""
    return "test_key_123456789"


@pytest.fixture
def mock_secret() -> str:
    """Mock Stream API secret for testing."""
    return "test_secret_abcdefghijklmnopqrstuvwxyz"


@pytest.fixture
def config(mock_key: str, mock_secret: str) -> StreamConfig:
    """Config pointing at the default Stream endpoint."""
    return StreamConfig(api_key=mock_key, api_secret=mock_secret)
