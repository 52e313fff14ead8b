"""
Statistics per aggregation unit.

https://developers.line.biz/en/reference/messaging-api/#get-statistics-per-unit
"""

from datetime import date, timedelta
from typing import List, Optional, Tuple

import httpx

from ..http.request import build_request
from ..models.base import CamelModel
from ..models.metadata import ResponseMetadata
from ..models.options import ExecutionOptions
from ..reliability.errors import ConfigurationError
from ..reliability.retry import execute_api

EVENT_AGGREGATION_PATH = "/v2/bot/insight/message/event/aggregation"

DATE_FORMAT = "%Y%m%d"
DEFAULT_WINDOW_DAYS = 30


class EventOverview(CamelModel):
    unique_impression: Optional[int] = None
    unique_click: Optional[int] = None
    unique_media_played: Optional[int] = None
    unique_media_played_100_percent: Optional[int] = None


class EventMessage(CamelModel):
    seq: int
    impression: Optional[int] = None
    unique_impression: Optional[int] = None
    media_played: Optional[int] = None
    media_played_25_percent: Optional[int] = None
    media_played_50_percent: Optional[int] = None
    media_played_75_percent: Optional[int] = None
    media_played_100_percent: Optional[int] = None
    unique_media_played: Optional[int] = None
    unique_media_played_25_percent: Optional[int] = None
    unique_media_played_50_percent: Optional[int] = None
    unique_media_played_75_percent: Optional[int] = None
    unique_media_played_100_percent: Optional[int] = None


class EventClick(CamelModel):
    seq: int
    url: Optional[str] = None
    click: Optional[int] = None
    unique_click: Optional[int] = None
    unique_click_of_request: Optional[int] = None


class MessageEventAggregation(CamelModel):
    overview: EventOverview
    messages: List[EventMessage]
    clicks: List[EventClick]


def default_window(today: Optional[date] = None) -> Tuple[str, str]:
    """The last 30 days as (from, to) in YYYYMMDD."""
    to_date = today or date.today()
    from_date = to_date - timedelta(days=DEFAULT_WINDOW_DAYS)
    return from_date.strftime(DATE_FORMAT), to_date.strftime(DATE_FORMAT)


async def get_message_event_aggregation(
    client: httpx.AsyncClient,
    custom_aggregation_unit: str,
    channel_access_token: str,
    from_date: Optional[str] = None,
    to_date: Optional[str] = None,
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[MessageEventAggregation, ResponseMetadata]:
    if not custom_aggregation_unit:
        raise ConfigurationError("custom_aggregation_unit is empty")
    default_from, default_to = default_window()
    params = {
        "customAggregationUnit": custom_aggregation_unit,
        "from": from_date or default_from,
        "to": to_date or default_to,
    }
    return await execute_api(
        lambda: build_request(
            client, "GET", EVENT_AGGREGATION_PATH, options,
            token=channel_access_token,
            params=params,
        ),
        MessageEventAggregation,
        client,
        options,
    )
