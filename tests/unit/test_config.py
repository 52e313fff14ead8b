"""Unit tests for execution options, host resolution and request building."""

import uuid

import httpx
import pytest
from pydantic import ValidationError

from line_api_sdk.config.constants import DEFAULT_PREFIX_URL
from line_api_sdk.config.settings import get_prefix_url, make_url
from line_api_sdk.http.request import build_request, request_timeout
from line_api_sdk.models.options import ExecutionOptions
from line_api_sdk.reliability.errors import ConfigurationError
from line_api_sdk.reliability.idempotency import apply_retry_key, new_retry_key, validate_retry_key

pytestmark = pytest.mark.unit


class TestExecutionOptions:
    """Test option defaults, bounds and environment loading."""

    def test_defaults(self):
        options = ExecutionOptions()

        assert options.base_url_override is None
        assert options.request_timeout == 0.0
        assert options.max_attempts == 1
        assert options.retry_base_delay == 0.0
        assert options.attempt_limit == 1
        assert not options.retries_enabled

    @pytest.mark.parametrize("max_attempts,limit", [(0, 1), (1, 1), (2, 2), (255, 255)])
    def test_attempt_limit(self, max_attempts, limit):
        assert ExecutionOptions(max_attempts=max_attempts).attempt_limit == limit

    @pytest.mark.parametrize("field,value", [
        ("max_attempts", -1),
        ("max_attempts", 256),
        ("retry_base_delay", -0.5),
        ("request_timeout", -1),
    ])
    def test_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            ExecutionOptions(**{field: value})

    def test_frozen(self):
        options = ExecutionOptions()
        with pytest.raises(ValidationError):
            options.max_attempts = 3

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("LINE_MAX_ATTEMPTS", "4")
        monkeypatch.setenv("LINE_RETRY_BASE_DELAY", "0.25")
        monkeypatch.setenv("LINE_REQUEST_TIMEOUT", "10")

        options = ExecutionOptions.from_env(max_attempts=2)

        assert options.max_attempts == 2
        assert options.retry_base_delay == 0.25
        assert options.request_timeout == 10.0

    def test_from_env_defaults(self):
        assert ExecutionOptions.from_env() == ExecutionOptions()


class TestHostResolution:
    """Test override, environment and default host precedence."""

    def test_default(self):
        assert get_prefix_url() == DEFAULT_PREFIX_URL

    def test_env(self, mock_env_vars):
        assert get_prefix_url() == "http://line.test"

    def test_override_wins(self, mock_env_vars):
        assert get_prefix_url("http://other.test") == "http://other.test"

    def test_make_url(self):
        options = ExecutionOptions(base_url_override="http://localhost:8080")
        assert make_url("/v2/bot/info", options) == "http://localhost:8080/v2/bot/info"


class TestBuildRequest:
    """Test outbound request construction."""

    @pytest.mark.asyncio
    async def test_bearer_token_and_params(self):
        options = ExecutionOptions(base_url_override="http://line.test")
        async with httpx.AsyncClient() as client:
            request = build_request(
                client, "GET", "/v2/bot/message/aggregation/list", options,
                token="tok", params={"limit": 10, "start": None}
            )

        assert request.method == "GET"
        assert str(request.url) == "http://line.test/v2/bot/message/aggregation/list?limit=10"
        assert request.headers["Authorization"] == "Bearer tok"

    @pytest.mark.asyncio
    async def test_form_body_drops_none(self):
        options = ExecutionOptions(base_url_override="http://line.test")
        async with httpx.AsyncClient() as client:
            request = build_request(
                client, "POST", "/oauth2/v2.1/verify", options,
                data={"id_token": "abc", "nonce": None}
            )

        assert request.content == b"id_token=abc"
        assert "Authorization" not in request.headers

    @pytest.mark.asyncio
    async def test_timeout(self):
        async with httpx.AsyncClient() as client:
            request = build_request(client, "GET", "/x", ExecutionOptions(request_timeout=2.5))

        assert request.extensions["timeout"]["read"] == 2.5

    def test_zero_timeout_uses_client_default(self):
        assert request_timeout(ExecutionOptions()) is httpx.USE_CLIENT_DEFAULT


class TestRetryKeys:
    """Test idempotency key helpers."""

    def test_new_key_is_uuid(self):
        key = new_retry_key()
        assert str(uuid.UUID(key)) == key
        assert new_retry_key() != key

    def test_validate(self):
        key = str(uuid.uuid4())
        assert validate_retry_key(key) == key

    def test_validate_rejects_non_uuid(self):
        with pytest.raises(ConfigurationError):
            validate_retry_key("not-a-uuid")

    def test_apply(self):
        request = httpx.Request("POST", "http://line.test/v2/bot/message/push")
        apply_retry_key(request, "k", attempt_limit=2)
        assert request.headers["X-Line-Retry-Key"] == "k"

    def test_apply_single_attempt(self):
        request = httpx.Request("POST", "http://line.test/v2/bot/message/push")
        apply_retry_key(request, "k", attempt_limit=1)
        assert "X-Line-Retry-Key" not in request.headers
