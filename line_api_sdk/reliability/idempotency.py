from __future__ import annotations

import uuid
from typing import Optional

import httpx

from ..config.constants import HEADER_RETRY_KEY
from .errors import ConfigurationError


def new_retry_key() -> str:
    """Return a fresh idempotency key for one logical call."""
    return str(uuid.uuid4())


def validate_retry_key(key: str) -> str:
    # the platform only accepts UUID-formatted keys
    try:
        uuid.UUID(key)
    except ValueError:
        raise ConfigurationError(f"retry key is not a UUID: {key!r}")
    return key


def apply_retry_key(request: httpx.Request, key: Optional[str], attempt_limit: int) -> httpx.Request:
    """
    Attach the retry key header when the call may be retried.

    With a single attempt there is nothing to deduplicate, so the header is
    left off even if a key was supplied.
    """
    if key is not None and attempt_limit > 1:
        request.headers[HEADER_RETRY_KEY] = key
    return request
