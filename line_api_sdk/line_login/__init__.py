"""LINE Login endpoint wrappers."""

from .oauth import Scope, make_code_challenge, oauth_url
from .token import TokenResponse, issue_token_by_code, refresh_access_token
from .verify import AccessTokenVerification, IdTokenClaims, verify_access_token, verify_id_token
from .profile import (
    FriendshipStatus,
    UserInfo,
    UserProfile,
    get_friendship_status,
    get_user_profile,
    get_userinfo,
)

__all__ = [
    "Scope",
    "make_code_challenge",
    "oauth_url",
    "TokenResponse",
    "issue_token_by_code",
    "refresh_access_token",
    "AccessTokenVerification",
    "IdTokenClaims",
    "verify_access_token",
    "verify_id_token",
    "FriendshipStatus",
    "UserInfo",
    "UserProfile",
    "get_friendship_status",
    "get_user_profile",
    "get_userinfo",
]
