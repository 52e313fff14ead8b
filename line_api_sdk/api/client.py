"""Main client interface for LINE API SDK."""

import os
from typing import Any, AsyncIterator, Dict, Iterable, List, Optional

import httpx
from dotenv import load_dotenv

from ..config.constants import CHANNEL_ACCESS_TOKEN_ENV_VAR
from ..line_login import oauth, profile as login_profile, token, verify
from ..messaging_api import aggregation, bot, insight, push, quota
from ..models.options import ExecutionOptions
from ..reliability.errors import ConfigurationError

load_dotenv()


class MessagingApi:
    """Messaging API calls bound to one channel access token."""

    def __init__(self, client: httpx.AsyncClient, channel_access_token: Optional[str],
                 options: ExecutionOptions):
        self._client = client
        self._token = channel_access_token
        self.options = options

    @property
    def channel_access_token(self) -> str:
        if not self._token:
            raise ConfigurationError(
                f"channel access token is not set (pass it or set {CHANNEL_ACCESS_TOKEN_ENV_VAR})"
            )
        return self._token

    async def push_message(self, to: str, messages: List[Dict[str, Any]],
                           retry_key: Optional[str] = None, **kwargs):
        body = push.PushMessageRequest.create(to, messages, **kwargs)
        return await push.push_message(
            self._client, body, self.channel_access_token, self.options, retry_key=retry_key
        )

    async def validate_push(self, messages: List[Dict[str, Any]]):
        return await push.validate_push(
            self._client, messages, self.channel_access_token, self.options
        )

    async def get_bot_info(self):
        return await bot.get_bot_info(self._client, self.channel_access_token, self.options)

    async def get_profile(self, user_id: str):
        return await bot.get_profile(
            self._client, user_id, self.channel_access_token, self.options
        )

    async def get_quota(self):
        return await quota.get_quota(self._client, self.channel_access_token, self.options)

    async def get_quota_consumption(self):
        return await quota.get_quota_consumption(
            self._client, self.channel_access_token, self.options
        )

    async def get_aggregation_info(self):
        return await aggregation.get_aggregation_info(
            self._client, self.channel_access_token, self.options
        )

    async def get_aggregation_list(self, limit: int = aggregation.DEFAULT_PAGE_LIMIT,
                                   start: Optional[str] = None):
        return await aggregation.get_aggregation_list(
            self._client, self.channel_access_token, limit=limit, start=start,
            options=self.options
        )

    def iter_aggregation_units(self, max_page_count: int) -> AsyncIterator[str]:
        return aggregation.iter_aggregation_units(
            self._client, self.channel_access_token, max_page_count, options=self.options
        )

    async def get_message_event_aggregation(self, custom_aggregation_unit: str,
                                            from_date: Optional[str] = None,
                                            to_date: Optional[str] = None):
        return await insight.get_message_event_aggregation(
            self._client, custom_aggregation_unit, self.channel_access_token,
            from_date=from_date, to_date=to_date, options=self.options
        )


class LineLogin:
    """LINE Login calls; tokens are passed per call since they belong to users."""

    def __init__(self, client: httpx.AsyncClient, options: ExecutionOptions):
        self._client = client
        self.options = options

    @staticmethod
    def oauth_url(client_id: str, redirect_uri: str, scopes: Iterable[oauth.Scope],
                  state: str, code_verifier: Optional[str] = None) -> str:
        return oauth.oauth_url(client_id, redirect_uri, scopes, state, code_verifier)

    async def issue_token_by_code(self, code: str, redirect_uri: str, client_id: str,
                                  client_secret: str, code_verifier: Optional[str] = None):
        return await token.issue_token_by_code(
            self._client, code, redirect_uri, client_id, client_secret,
            code_verifier=code_verifier, options=self.options
        )

    async def refresh_access_token(self, refresh_token: str, client_id: str,
                                   client_secret: Optional[str] = None):
        return await token.refresh_access_token(
            self._client, refresh_token, client_id, client_secret, options=self.options
        )

    async def verify_access_token(self, access_token: str):
        return await verify.verify_access_token(self._client, access_token, self.options)

    async def verify_id_token(self, id_token: str, client_id: str,
                              nonce: Optional[str] = None, user_id: Optional[str] = None):
        return await verify.verify_id_token(
            self._client, id_token, client_id, nonce=nonce, user_id=user_id,
            options=self.options
        )

    async def get_user_profile(self, access_token: str):
        return await login_profile.get_user_profile(self._client, access_token, self.options)

    async def get_userinfo(self, access_token: str, method: str = "GET"):
        return await login_profile.get_userinfo(
            self._client, access_token, method=method, options=self.options
        )

    async def get_friendship_status(self, access_token: str):
        return await login_profile.get_friendship_status(
            self._client, access_token, self.options
        )


class LineClient:
    """High-level client for LINE API SDK."""

    def __init__(
        self,
        channel_access_token: Optional[str] = None,
        options: Optional[ExecutionOptions] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the client.

        Args:
            channel_access_token: Messaging API token; defaults to
                LINE_CHANNEL_ACCESS_TOKEN
            options: Execution options shared by every call
            http_client: Transport to use; one is created (and closed by
                ``aclose``) when omitted
        """
        self.options = options or ExecutionOptions()
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient()
        token_value = channel_access_token or os.getenv(CHANNEL_ACCESS_TOKEN_ENV_VAR)
        self.messaging = MessagingApi(self.http_client, token_value, self.options)
        self.login = LineLogin(self.http_client, self.options)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "LineClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
