"""
Bot information and user profile endpoints.

https://developers.line.biz/en/reference/messaging-api/#get-bot-info
https://developers.line.biz/en/reference/messaging-api/#get-profile
"""

from enum import Enum
from typing import Optional, Tuple

import httpx

from ..http.request import build_request
from ..models.base import CamelModel
from ..models.metadata import ResponseMetadata
from ..models.options import ExecutionOptions
from ..reliability.errors import ConfigurationError
from ..reliability.retry import execute_api

BOT_INFO_PATH = "/v2/bot/info"
PROFILE_PATH = "/v2/bot/profile"


class ChatMode(str, Enum):
    CHAT = "chat"
    BOT = "bot"


class MarkAsReadMode(str, Enum):
    AUTO = "auto"
    MANUAL = "manual"


class BotInfo(CamelModel):
    user_id: str
    basic_id: str
    premium_id: Optional[str] = None
    display_name: str
    picture_url: Optional[str] = None
    chat_mode: ChatMode
    mark_as_read_mode: MarkAsReadMode


class BotUserProfile(CamelModel):
    display_name: str
    user_id: str
    language: Optional[str] = None
    picture_url: Optional[str] = None
    status_message: Optional[str] = None


async def get_bot_info(
    client: httpx.AsyncClient,
    channel_access_token: str,
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[BotInfo, ResponseMetadata]:
    return await execute_api(
        lambda: build_request(client, "GET", BOT_INFO_PATH, options, token=channel_access_token),
        BotInfo,
        client,
        options,
    )


async def get_profile(
    client: httpx.AsyncClient,
    user_id: str,
    channel_access_token: str,
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[BotUserProfile, ResponseMetadata]:
    """Profile of a user who is a friend of the bot."""
    if not user_id:
        raise ConfigurationError("user_id is empty")
    return await execute_api(
        lambda: build_request(
            client, "GET", f"{PROFILE_PATH}/{user_id}", options, token=channel_access_token
        ),
        BotUserProfile,
        client,
        options,
    )
