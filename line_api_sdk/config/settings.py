"""Host resolution for endpoint URLs."""

import os
from typing import Optional

from dotenv import load_dotenv

from .constants import DEFAULT_PREFIX_URL, PREFIX_URL_ENV_VAR

load_dotenv()


def get_prefix_url(base_url_override: Optional[str] = None) -> str:
    """
    Resolve the API host for a call.

    Precedence: explicit override, then the LINE_API_PREFIX_URL environment
    variable, then the public LINE host.
    """
    if base_url_override:
        return base_url_override
    return os.getenv(PREFIX_URL_ENV_VAR) or DEFAULT_PREFIX_URL


def make_url(path: str, options) -> str:
    """Join an endpoint path onto the host selected by ``options``."""
    return f"{get_prefix_url(options.base_url_override)}{path}"
