"""Reliability layer: response classification, retries and idempotency.

This layer handles:
- Typed error definitions
- Classification of responses into attempt outcomes
- Retry logic with exponential backoff and jitter
- Idempotency (retry) keys for mutating calls
"""

from .errors import (
    LineApiError,
    ConfigurationError,
    TransportError,
    DeadlineExceededError,
    MalformedResponseError,
    StructuredApiError,
    UnstructuredJsonError,
)
from .classifier import (
    AttemptSuccess,
    AttemptFailure,
    AttemptOutcome,
    ErrorCategory,
    ResponseClassifier,
)
from .idempotency import new_retry_key, validate_retry_key, apply_retry_key
from .retry import (
    RetryManager,
    execute_api,
    compute_backoff,
    is_standard_retry,
    never_retry,
)

__all__ = [
    "LineApiError",
    "ConfigurationError",
    "TransportError",
    "DeadlineExceededError",
    "MalformedResponseError",
    "StructuredApiError",
    "UnstructuredJsonError",
    "AttemptSuccess",
    "AttemptFailure",
    "AttemptOutcome",
    "ErrorCategory",
    "ResponseClassifier",
    "new_retry_key",
    "validate_retry_key",
    "apply_retry_key",
    "RetryManager",
    "execute_api",
    "compute_backoff",
    "is_standard_retry",
    "never_retry",
]
