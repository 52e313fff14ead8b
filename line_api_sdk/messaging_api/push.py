"""
Push message endpoints.

https://developers.line.biz/en/reference/messaging-api/#send-push-message
https://developers.line.biz/en/reference/messaging-api/#validate-message-objects-of-push-message
"""

from typing import Any, Dict, List, Optional, Tuple

import httpx

from ..http.request import build_request
from ..models.base import CamelModel
from ..models.metadata import ResponseMetadata
from ..models.options import ExecutionOptions
from ..reliability.errors import ConfigurationError
from ..reliability.idempotency import new_retry_key, validate_retry_key
from ..reliability.retry import execute_api, is_standard_retry

PUSH_PATH = "/v2/bot/message/push"
VALIDATE_PUSH_PATH = "/v2/bot/message/validate/push"

MAX_MESSAGES = 5


def check_messages(messages: List[Dict[str, Any]]) -> None:
    if not messages:
        raise ConfigurationError("messages is empty")
    if len(messages) > MAX_MESSAGES:
        raise ConfigurationError(f"messages is too long: {len(messages)}")


class PushMessageRequest(CamelModel):
    to: str
    messages: List[Dict[str, Any]]
    notification_disabled: Optional[bool] = None
    custom_aggregation_units: Optional[List[str]] = None

    @classmethod
    def create(cls, to: str, messages: List[Dict[str, Any]], **kwargs) -> "PushMessageRequest":
        """Validate and build a request body."""
        if not to:
            raise ConfigurationError("to is empty")
        check_messages(messages)
        return cls(to=to, messages=messages, **kwargs)


class SentMessage(CamelModel):
    id: str
    quote_token: Optional[str] = None


class PushMessageResponse(CamelModel):
    sent_messages: List[SentMessage]
    # set when the request was already accepted by an earlier attempt
    message: Optional[str] = None


def build_push_message(
    client: httpx.AsyncClient,
    body: PushMessageRequest,
    channel_access_token: str,
    options: ExecutionOptions
) -> httpx.Request:
    return build_request(
        client, "POST", PUSH_PATH, options,
        token=channel_access_token,
        json=body.model_dump(by_alias=True, exclude_none=True),
    )


async def push_message(
    client: httpx.AsyncClient,
    body: PushMessageRequest,
    channel_access_token: str,
    options: ExecutionOptions = ExecutionOptions(),
    retry_key: Optional[str] = None
) -> Tuple[PushMessageResponse, ResponseMetadata]:
    """
    Send a push message.

    A retry key is generated for the call unless one is given, so retried
    attempts are delivered at most once. Pass your own key to retry the same
    logical send later (e.g. after a cancelled call).
    """
    retry_key = validate_retry_key(retry_key) if retry_key else new_retry_key()
    return await execute_api(
        lambda: build_push_message(client, body, channel_access_token, options),
        PushMessageResponse,
        client,
        options,
        is_retryable=is_standard_retry,
        idempotency_key=retry_key,
    )


async def validate_push(
    client: httpx.AsyncClient,
    messages: List[Dict[str, Any]],
    channel_access_token: str,
    options: ExecutionOptions = ExecutionOptions()
) -> Tuple[Dict[str, Any], ResponseMetadata]:
    """Validate message objects without sending them; the body is ``{}`` when valid."""
    check_messages(messages)
    return await execute_api(
        lambda: build_request(
            client, "POST", VALIDATE_PUSH_PATH, options,
            token=channel_access_token,
            json={"messages": messages},
        ),
        Dict[str, Any],
        client,
        options,
    )
