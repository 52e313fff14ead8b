"""Configuration for LINE API SDK."""

from .constants import (
    DEFAULT_PREFIX_URL,
    PREFIX_URL_ENV_VAR,
    HEADER_RETRY_KEY,
    HEADER_REQUEST_ID,
    HEADER_ACCEPTED_REQUEST_ID,
)
from .settings import get_prefix_url, make_url

__all__ = [
    "DEFAULT_PREFIX_URL",
    "PREFIX_URL_ENV_VAR",
    "HEADER_RETRY_KEY",
    "HEADER_REQUEST_ID",
    "HEADER_ACCEPTED_REQUEST_ID",
    "get_prefix_url",
    "make_url",
]
