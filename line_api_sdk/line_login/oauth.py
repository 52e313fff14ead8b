"""
Authorization URL construction for LINE Login, with optional PKCE.

https://developers.line.biz/en/docs/line-login/integrate-pkce/
"""

import base64
import hashlib
from enum import Enum
from typing import Iterable, Optional
from urllib.parse import urlencode

from ..config.constants import AUTHORIZE_URL
from ..reliability.errors import ConfigurationError

CODE_VERIFIER_MIN_LENGTH = 43
CODE_VERIFIER_MAX_LENGTH = 128


class Scope(str, Enum):
    PROFILE = "profile"
    OPENID = "openid"
    EMAIL = "email"


def make_code_challenge(code_verifier: str) -> str:
    """S256 code challenge: unpadded URL-safe base64 of the verifier's SHA-256."""
    if not CODE_VERIFIER_MIN_LENGTH <= len(code_verifier) <= CODE_VERIFIER_MAX_LENGTH:
        raise ConfigurationError("code_verifier is length invalid")
    digest = hashlib.sha256(code_verifier.encode("ascii")).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


def oauth_url(
    client_id: str,
    redirect_uri: str,
    scopes: Iterable[Scope],
    state: str,
    code_verifier: Optional[str] = None
) -> str:
    """
    Build the URL a user is sent to for authorization.

    Args:
        client_id: LINE Login channel ID
        redirect_uri: Callback URL registered for the channel
        scopes: Requested permissions
        state: Opaque value echoed back to the callback (CSRF protection)
        code_verifier: PKCE verifier (43-128 chars); adds an S256 challenge

    Raises:
        ConfigurationError: If the code verifier length is out of bounds
    """
    query = [
        ("response_type", "code"),
        ("client_id", client_id),
        ("redirect_uri", redirect_uri),
        ("state", state),
        ("scope", " ".join(Scope(scope).value for scope in scopes)),
    ]
    if code_verifier is not None:
        query.append(("code_challenge", make_code_challenge(code_verifier)))
        query.append(("code_challenge_method", "S256"))
    return f"{AUTHORIZE_URL}?{urlencode(query)}"
