"""
Token verification endpoints.

https://developers.line.biz/en/reference/line-login/#verify-access-token
https://developers.line.biz/en/reference/line-login/#verify-id-token
"""

from typing import List, Optional, Tuple

import httpx

from ..http.request import build_request
from ..models.base import LineModel
from ..models.metadata import ResponseMetadata
from ..models.options import ExecutionOptions
from ..reliability.errors import ConfigurationError
from ..reliability.retry import execute_api

VERIFY_PATH = "/oauth2/v2.1/verify"


class AccessTokenVerification(LineModel):
    scope: str
    client_id: str
    expires_in: int


class IdTokenClaims(LineModel):
    iss: str
    sub: str
    aud: str
    exp: int
    iat: int
    auth_time: Optional[int] = None
    nonce: Optional[str] = None
    amr: List[str]
    name: Optional[str] = None
    picture: Optional[str] = None
    email: Optional[str] = None


async def verify_access_token(
    client: httpx.AsyncClient,
    access_token: str,
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[AccessTokenVerification, ResponseMetadata]:
    if not access_token:
        raise ConfigurationError("access_token is empty")
    return await execute_api(
        lambda: build_request(
            client, "GET", VERIFY_PATH, options, params={"access_token": access_token}
        ),
        AccessTokenVerification,
        client,
        options,
    )


async def verify_id_token(
    client: httpx.AsyncClient,
    id_token: str,
    client_id: str,
    nonce: Optional[str] = None,
    user_id: Optional[str] = None,
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[IdTokenClaims, ResponseMetadata]:
    """Verify an ID token and return its decoded claims."""
    if not id_token:
        raise ConfigurationError("id_token is empty")
    if not client_id:
        raise ConfigurationError("client_id is empty")
    form = {
        "id_token": id_token,
        "client_id": client_id,
        "nonce": nonce,
        "user_id": user_id,
    }
    return await execute_api(
        lambda: build_request(client, "POST", VERIFY_PATH, options, data=form),
        IdTokenClaims,
        client,
        options,
    )
