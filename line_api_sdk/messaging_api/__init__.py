"""Messaging API endpoint wrappers."""

from .push import (
    PushMessageRequest,
    PushMessageResponse,
    SentMessage,
    build_push_message,
    push_message,
    validate_push,
)
from .bot import BotInfo, BotUserProfile, ChatMode, MarkAsReadMode, get_bot_info, get_profile
from .quota import MessageQuota, QuotaConsumption, get_quota, get_quota_consumption
from .aggregation import (
    AggregationInfo,
    AggregationList,
    get_aggregation_info,
    get_aggregation_list,
    iter_aggregation_units,
)
from .insight import (
    EventClick,
    EventMessage,
    EventOverview,
    MessageEventAggregation,
    get_message_event_aggregation,
)

__all__ = [
    "PushMessageRequest",
    "PushMessageResponse",
    "SentMessage",
    "build_push_message",
    "push_message",
    "validate_push",
    "BotInfo",
    "BotUserProfile",
    "ChatMode",
    "MarkAsReadMode",
    "get_bot_info",
    "get_profile",
    "MessageQuota",
    "QuotaConsumption",
    "get_quota",
    "get_quota_consumption",
    "AggregationInfo",
    "AggregationList",
    "get_aggregation_info",
    "get_aggregation_list",
    "iter_aggregation_units",
    "EventClick",
    "EventMessage",
    "EventOverview",
    "MessageEventAggregation",
    "get_message_event_aggregation",
]
