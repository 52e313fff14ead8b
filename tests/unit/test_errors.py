"""Unit tests for the error taxonomy and its models."""

import json

import httpx
import pytest
from pydantic import ValidationError

from line_api_sdk.models.error_response import ErrorResponse
from line_api_sdk.models.metadata import ResponseMetadata
from line_api_sdk.reliability.errors import (
    ConfigurationError,
    DeadlineExceededError,
    LineApiError,
    MalformedResponseError,
    StructuredApiError,
    TransportError,
    UnstructuredJsonError,
)

pytestmark = pytest.mark.unit


class TestErrorHierarchy:
    """Every engine error is catchable as LineApiError."""

    def test_subclasses(self):
        metadata = ResponseMetadata(request_id="r")
        errors = [
            ConfigurationError("bad input"),
            TransportError("refused"),
            DeadlineExceededError(1.5),
            MalformedResponseError(502, "oops", metadata),
            StructuredApiError(400, ErrorResponse(message="bad"), metadata),
            UnstructuredJsonError(500, {"x": 1}, metadata),
        ]
        for error in errors:
            assert isinstance(error, LineApiError)
            assert error.attempts == 1

    def test_deadline_is_transport_error(self):
        error = DeadlineExceededError(2.0)
        assert isinstance(error, TransportError)
        assert error.status_code is None
        assert "2.0" in str(error)


class TestToDict:
    """Test JSON-serializable projections."""

    def test_structured_error(self):
        body = {
            "message": "The request body has 1 error(s)",
            "details": [{"message": "Must be one of the following values: [text]", "property": "messages[0].type"}],
        }
        error = StructuredApiError(
            400, ErrorResponse.model_validate(body), ResponseMetadata(request_id="req-123")
        )
        error.attempts = 2

        result = error.to_dict()
        assert result == {
            "error_type": "StructuredApiError",
            "message": "The request body has 1 error(s)",
            "attempts": 2,
            "status_code": 400,
            "metadata": {"request_id": "req-123"},
            "error_response": body,
        }
        json.dumps(result)

    def test_transport_error(self):
        original = httpx.ConnectError("refused")
        result = TransportError("ConnectError: refused", original_error=original).to_dict()

        assert result["error_type"] == "TransportError"
        assert result["original_error"] == "ConnectError"
        assert "status_code" not in result
        assert "metadata" not in result

    def test_malformed_text_is_truncated(self):
        error = MalformedResponseError(502, "x" * 2000, ResponseMetadata())

        assert len(error.to_dict()["text"]) == 500
        assert error.text == "x" * 2000

    def test_unstructured_payload(self):
        result = UnstructuredJsonError(500, [1, 2], ResponseMetadata(request_id="r")).to_dict()

        assert result["payload"] == [1, 2]
        assert result["metadata"] == {"request_id": "r"}


class TestErrorResponse:
    """The platform error body keeps fields the model does not declare."""

    def test_extra_fields_round_trip(self):
        body = {
            "message": "Conflict",
            "sentMessages": [{"id": "461230966842064897"}],
            "details": [{"message": "dup", "property": "to", "code": "X1"}],
        }
        parsed = ErrorResponse.model_validate(body)

        assert parsed.model_dump(exclude_none=True) == body
        assert ErrorResponse.model_validate(parsed.model_dump()).message == "Conflict"

    def test_missing_message_is_invalid(self):
        with pytest.raises(ValidationError):
            ErrorResponse.model_validate({"details": []})


class TestResponseMetadata:
    def test_from_headers(self):
        headers = httpx.Headers({
            "X-Line-Request-Id": "req-1",
            "x-line-accepted-request-id": "req-0",
        })
        metadata = ResponseMetadata.from_headers(headers)

        assert metadata.request_id == "req-1"
        assert metadata.accepted_request_id == "req-0"
        assert metadata.to_dict() == {"request_id": "req-1", "accepted_request_id": "req-0"}

    def test_missing_headers(self):
        metadata = ResponseMetadata.from_headers(httpx.Headers({}))

        assert metadata.request_id == ""
        assert metadata.to_dict() == {"request_id": ""}
