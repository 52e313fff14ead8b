"""
Access token issuance.

https://developers.line.biz/en/reference/line-login/#issue-access-token
"""

from typing import Any, Dict, Optional, Tuple

import httpx

from ..http.request import build_request
from ..models.base import LineModel
from ..models.metadata import ResponseMetadata
from ..models.options import ExecutionOptions
from ..reliability.errors import ConfigurationError
from ..reliability.retry import execute_api, is_standard_retry, never_retry

TOKEN_PATH = "/oauth2/v2.1/token"


class TokenResponse(LineModel):
    access_token: str
    expires_in: int
    id_token: Optional[str] = None
    refresh_token: str
    scope: str
    token_type: str


def _require(**values: str) -> None:
    for name, value in values.items():
        if not value:
            raise ConfigurationError(f"{name} is empty")


async def _request_token(
    client: httpx.AsyncClient,
    form: Dict[str, Any],
    options: ExecutionOptions,
    is_retryable
) -> Tuple[TokenResponse, ResponseMetadata]:
    return await execute_api(
        lambda: build_request(client, "POST", TOKEN_PATH, options, data=form),
        TokenResponse,
        client,
        options,
        is_retryable=is_retryable,
    )


async def issue_token_by_code(
    client: httpx.AsyncClient,
    code: str,
    redirect_uri: str,
    client_id: str,
    client_secret: str,
    code_verifier: Optional[str] = None,
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[TokenResponse, ResponseMetadata]:
    """
    Exchange an authorization code for tokens.

    The code is single-use, so this call is never retried regardless of
    ``options.max_attempts``.
    """
    _require(code=code, redirect_uri=redirect_uri, client_id=client_id, client_secret=client_secret)
    form = {
        "grant_type": "authorization_code",
        "code": code,
        "redirect_uri": redirect_uri,
        "client_id": client_id,
        "client_secret": client_secret,
        "code_verifier": code_verifier,
    }
    return await _request_token(client, form, options, never_retry)


async def refresh_access_token(
    client: httpx.AsyncClient,
    refresh_token: str,
    client_id: str,
    client_secret: Optional[str] = None,
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[TokenResponse, ResponseMetadata]:
    _require(refresh_token=refresh_token, client_id=client_id)
    form = {
        "grant_type": "refresh_token",
        "refresh_token": refresh_token,
        "client_id": client_id,
        "client_secret": client_secret,
    }
    return await _request_token(client, form, options, is_standard_retry)
