"""
Message quota endpoints.

https://developers.line.biz/en/reference/messaging-api/#get-quota
https://developers.line.biz/en/reference/messaging-api/#get-consumption
"""

from typing import Optional, Tuple

import httpx
from pydantic import Field

from ..http.request import build_request
from ..models.base import CamelModel, LineModel
from ..models.metadata import ResponseMetadata
from ..models.options import ExecutionOptions
from ..reliability.retry import execute_api

QUOTA_PATH = "/v2/bot/message/quota"
QUOTA_CONSUMPTION_PATH = "/v2/bot/message/quota/consumption"


class MessageQuota(LineModel):
    # "none" (no limit) or "limited"
    type_code: str = Field(alias="type")
    value: Optional[int] = None


class QuotaConsumption(CamelModel):
    total_usage: int


async def get_quota(
    client: httpx.AsyncClient,
    channel_access_token: str,
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[MessageQuota, ResponseMetadata]:
    return await execute_api(
        lambda: build_request(client, "GET", QUOTA_PATH, options, token=channel_access_token),
        MessageQuota,
        client,
        options,
    )


async def get_quota_consumption(
    client: httpx.AsyncClient,
    channel_access_token: str,
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[QuotaConsumption, ResponseMetadata]:
    return await execute_api(
        lambda: build_request(
            client, "GET", QUOTA_CONSUMPTION_PATH, options, token=channel_access_token
        ),
        QuotaConsumption,
        client,
        options,
    )
