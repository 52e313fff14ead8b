"""Helpers endpoint wrappers use to build one outbound request."""

from typing import Any, Dict, Optional

import httpx

from ..config.settings import make_url
from ..models.options import ExecutionOptions


def bearer_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def request_timeout(options: ExecutionOptions):
    """Per-attempt timeout; zero leaves the client's own default in place."""
    if options.request_timeout == 0:
        return httpx.USE_CLIENT_DEFAULT
    return options.request_timeout


def build_request(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    options: ExecutionOptions,
    *,
    token: Optional[str] = None,
    params: Optional[Dict[str, Any]] = None,
    json: Any = None,
    data: Optional[Dict[str, Any]] = None
) -> httpx.Request:
    """
    Build a request for ``path`` on the configured host.

    Args:
        client: Client the request will be sent on
        method: HTTP method
        path: Endpoint path, appended to the host
        options: Supplies the host override and timeout
        token: Bearer token for the Authorization header
        params: Query parameters; ``None`` values are dropped
        json: JSON body
        data: Form body; ``None`` values are dropped
    """
    headers = bearer_headers(token) if token else None
    if params is not None:
        params = {k: v for k, v in params.items() if v is not None}
    if data is not None:
        data = {k: v for k, v in data.items() if v is not None}
    return client.build_request(
        method,
        make_url(path, options),
        headers=headers,
        params=params,
        json=json,
        data=data,
        timeout=request_timeout(options),
    )
