"""
LINE API SDK - async client for the LINE Messaging API and LINE Login.

This package provides:
- A resilient execution engine: response classification, retries with
  exponential backoff and jitter, idempotency (retry) keys
- Typed pydantic models for requests, responses and platform errors
- Endpoint wrappers for the Messaging API and LINE Login
"""

__version__ = "0.1.0"

from .api.client import LineClient
from .models import ErrorDetail, ErrorResponse, ExecutionOptions, ResponseMetadata
from .reliability import (
    ConfigurationError,
    DeadlineExceededError,
    LineApiError,
    MalformedResponseError,
    RetryManager,
    StructuredApiError,
    TransportError,
    UnstructuredJsonError,
    execute_api,
    is_standard_retry,
    never_retry,
    new_retry_key,
)

__all__ = [
    # Main client
    "LineClient",

    # Engine
    "RetryManager",
    "execute_api",
    "is_standard_retry",
    "never_retry",
    "new_retry_key",

    # Models
    "ExecutionOptions",
    "ResponseMetadata",
    "ErrorResponse",
    "ErrorDetail",

    # Errors
    "LineApiError",
    "ConfigurationError",
    "TransportError",
    "DeadlineExceededError",
    "MalformedResponseError",
    "StructuredApiError",
    "UnstructuredJsonError",
]
