"""Fixtures for live API tests.

These tests require real API credentials set via environment variables:
- STREAM_API_KEY: Stream API key
- STREAM_API_SECRET: Stream API secret
"""

import pytest

from streamfeed import StreamConfig


@pytest.fixture
def live_config() -> StreamConfig:
    return StreamConfig.from_env()
