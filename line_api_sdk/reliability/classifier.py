"""
Response classification for the execution engine.

A completed HTTP response is turned into exactly one attempt outcome,
evaluated in a fixed priority order:

1. non-JSON body            -> MalformedResponseError
2. JSON on success status   -> AttemptSuccess
3. JSON matching the schema -> StructuredApiError
4. any other JSON           -> UnstructuredJsonError
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from ..config.constants import CONFLICT_STATUS_CODE
from ..models.error_response import ErrorResponse
from ..models.metadata import ResponseMetadata
from .errors import (
    LineApiError,
    MalformedResponseError,
    StructuredApiError,
    TransportError,
    UnstructuredJsonError,
)


class ErrorCategory(Enum):
    """Coarse error categories used for logging."""
    RATE_LIMIT = "rate_limit"
    AUTHENTICATION = "authentication"
    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION = "validation"
    SERVER_ERROR = "server_error"
    NETWORK = "network"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class AttemptSuccess:
    """A response whose JSON body may be deserialized into the target type."""
    payload: Any
    metadata: ResponseMetadata
    status_code: int


@dataclass(frozen=True)
class AttemptFailure:
    """A classified failure of a single attempt."""
    error: LineApiError


AttemptOutcome = Union[AttemptSuccess, AttemptFailure]


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


class ResponseClassifier:
    """Classifies raw responses into attempt outcomes."""

    @classmethod
    def classify(
        cls,
        status_code: int,
        headers: Mapping[str, str],
        text: str,
        conflict_is_success: bool = False
    ) -> AttemptOutcome:
        """
        Classify one completed response.

        Args:
            status_code: HTTP status of the response
            headers: Case-insensitive response headers
            text: Raw body text
            conflict_is_success: Treat 409 as success; the platform answers 409
                to a retried request that an earlier attempt already applied

        Returns:
            AttemptSuccess or AttemptFailure
        """
        metadata = ResponseMetadata.from_headers(headers)
        try:
            payload = json.loads(text)
        except ValueError:
            return AttemptFailure(MalformedResponseError(status_code, text, metadata))

        if is_success_status(status_code) or (
            conflict_is_success and status_code == CONFLICT_STATUS_CODE
        ):
            return AttemptSuccess(payload=payload, metadata=metadata, status_code=status_code)

        return AttemptFailure(cls.classify_payload(payload, status_code, metadata))

    @classmethod
    def classify_payload(
        cls,
        payload: Any,
        status_code: int,
        metadata: ResponseMetadata
    ) -> LineApiError:
        """Turn a decoded JSON payload into the matching error type."""
        try:
            error_response = ErrorResponse.model_validate(payload)
        except ValidationError:
            return UnstructuredJsonError(status_code, payload, metadata)
        return StructuredApiError(status_code, error_response, metadata)

    @classmethod
    def categorize(cls, error: LineApiError) -> ErrorCategory:
        """Categorize an error for log fields."""
        if isinstance(error, TransportError):
            return ErrorCategory.NETWORK
        return cls._categorize_by_status_code(error.status_code)

    @classmethod
    def _categorize_by_status_code(cls, status_code: Optional[int]) -> ErrorCategory:
        if status_code is None:
            return ErrorCategory.UNKNOWN
        if status_code == 401:
            return ErrorCategory.AUTHENTICATION
        elif status_code == 403:
            return ErrorCategory.PERMISSION_DENIED
        elif status_code == 404:
            return ErrorCategory.NOT_FOUND
        elif status_code == 409:
            return ErrorCategory.CONFLICT
        elif status_code == 429:
            return ErrorCategory.RATE_LIMIT
        elif status_code >= 500:
            return ErrorCategory.SERVER_ERROR
        elif status_code >= 400:
            return ErrorCategory.VALIDATION
        return ErrorCategory.UNKNOWN
