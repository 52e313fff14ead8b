"""Shared pytest fixtures for LINE API SDK tests."""

import pytest
from dotenv import load_dotenv
from unittest.mock import AsyncMock, patch

# Load environment variables from .env file for tests
load_dotenv()

from line_api_sdk.models.options import ExecutionOptions


@pytest.fixture(autouse=True)
def clean_line_env(monkeypatch):
    """Keep a developer's LINE_* variables from leaking into tests."""
    for key in (
        "LINE_API_PREFIX_URL",
        "LINE_CHANNEL_ACCESS_TOKEN",
        "LINE_MAX_ATTEMPTS",
        "LINE_RETRY_BASE_DELAY",
        "LINE_REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    env_vars = {
        "LINE_CHANNEL_ACCESS_TOKEN": "test-channel-token",
        "LINE_API_PREFIX_URL": "http://line.test",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def no_sleep():
    """Replace the engine's backoff sleep so retries do not wait."""
    with patch("line_api_sdk.reliability.retry.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep


@pytest.fixture
def options():
    """Three attempts with a short backoff, against a fake host."""
    return ExecutionOptions(
        base_url_override="http://line.test",
        max_attempts=3,
        retry_base_delay=0.01,
    )


@pytest.fixture
def single_attempt_options():
    return ExecutionOptions(base_url_override="http://line.test")

