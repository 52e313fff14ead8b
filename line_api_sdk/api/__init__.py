"""High-level client API."""

from .client import LineClient, LineLogin, MessagingApi

__all__ = ["LineClient", "LineLogin", "MessagingApi"]
