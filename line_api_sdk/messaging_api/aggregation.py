"""
Custom aggregation unit endpoints.

https://developers.line.biz/en/reference/messaging-api/#get-the-number-of-unit-name-types-assigned-during-this-month
https://developers.line.biz/en/reference/messaging-api/#get-a-list-of-unit-names-assigned-during-this-month
"""

from typing import AsyncIterator, List, Optional, Tuple

import httpx

from ..http.request import build_request
from ..models.base import CamelModel
from ..models.metadata import ResponseMetadata
from ..models.options import ExecutionOptions
from ..reliability.errors import ConfigurationError
from ..reliability.retry import execute_api

AGGREGATION_INFO_PATH = "/v2/bot/message/aggregation/info"
AGGREGATION_LIST_PATH = "/v2/bot/message/aggregation/list"

DEFAULT_PAGE_LIMIT = 100


class AggregationInfo(CamelModel):
    num_of_custom_aggregation_units: int


class AggregationList(CamelModel):
    custom_aggregation_units: List[str]
    next: Optional[str] = None


async def get_aggregation_info(
    client: httpx.AsyncClient,
    channel_access_token: str,
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[AggregationInfo, ResponseMetadata]:
    return await execute_api(
        lambda: build_request(
            client, "GET", AGGREGATION_INFO_PATH, options, token=channel_access_token
        ),
        AggregationInfo,
        client,
        options,
    )


async def get_aggregation_list(
    client: httpx.AsyncClient,
    channel_access_token: str,
    limit: int = DEFAULT_PAGE_LIMIT,
    start: Optional[str] = None,
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[AggregationList, ResponseMetadata]:
    """One page of unit names; ``start`` is the ``next`` cursor of the previous page."""
    if not 1 <= limit <= DEFAULT_PAGE_LIMIT:
        raise ConfigurationError(f"limit must be between 1 and {DEFAULT_PAGE_LIMIT}: {limit}")
    params = {"limit": limit, "start": start or None}
    return await execute_api(
        lambda: build_request(
            client, "GET", AGGREGATION_LIST_PATH, options,
            token=channel_access_token,
            params=params,
        ),
        AggregationList,
        client,
        options,
    )


async def iter_aggregation_units(
    client: httpx.AsyncClient,
    channel_access_token: str,
    max_page_count: int,
    limit: int = DEFAULT_PAGE_LIMIT,
    options: ExecutionOptions = ExecutionOptions()
) -> AsyncIterator[str]:
    """
    Yield unit names page by page, following ``next`` cursors.

    Stops on an empty page, a missing or empty cursor, or after ``max_page_count``
    pages. Errors from any page propagate to the consumer.
    """
    start = None
    for _ in range(max_page_count):
        page, _metadata = await get_aggregation_list(
            client, channel_access_token, limit=limit, start=start, options=options
        )
        if not page.custom_aggregation_units:
            return
        for unit in page.custom_aggregation_units:
            yield unit
        if not page.next:
            return
        start = page.next
