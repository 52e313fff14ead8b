"""
User-facing endpoints called with a user's access token.

https://developers.line.biz/en/reference/line-login/#get-user-profile
https://developers.line.biz/en/reference/line-login/#userinfo
https://developers.line.biz/en/reference/line-login/#get-friendship-status
"""

from typing import Optional, Tuple

import httpx

from ..http.request import build_request
from ..models.base import CamelModel, LineModel
from ..models.metadata import ResponseMetadata
from ..models.options import ExecutionOptions
from ..reliability.errors import ConfigurationError
from ..reliability.retry import execute_api

PROFILE_PATH = "/v2/profile"
USERINFO_PATH = "/oauth2/v2.1/userinfo"
FRIENDSHIP_PATH = "/friendship/v1/status"


class UserProfile(CamelModel):
    user_id: str
    display_name: str
    picture_url: Optional[str] = None
    status_message: Optional[str] = None


class UserInfo(LineModel):
    sub: str
    name: Optional[str] = None
    picture: Optional[str] = None


class FriendshipStatus(CamelModel):
    friend_flag: bool


async def get_user_profile(
    client: httpx.AsyncClient,
    access_token: str,
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[UserProfile, ResponseMetadata]:
    return await execute_api(
        lambda: build_request(client, "GET", PROFILE_PATH, options, token=access_token),
        UserProfile,
        client,
        options,
    )


async def get_userinfo(
    client: httpx.AsyncClient,
    access_token: str,
    method: str = "GET",
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[UserInfo, ResponseMetadata]:
    """OpenID Connect userinfo; the platform accepts both GET and POST."""
    method = method.upper()
    if method not in ("GET", "POST"):
        raise ConfigurationError(f"unsupported method for userinfo: {method}")
    return await execute_api(
        lambda: build_request(client, method, USERINFO_PATH, options, token=access_token),
        UserInfo,
        client,
        options,
    )


async def get_friendship_status(
    client: httpx.AsyncClient,
    access_token: str,
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[FriendshipStatus, ResponseMetadata]:
    """Whether the user has added the channel's linked bot as a friend."""
    return await execute_api(
        lambda: build_request(client, "GET", FRIENDSHIP_PATH, options, token=access_token),
        FriendshipStatus,
        client,
        options,
    )
