"""
Structured logging utility for the execution engine and endpoint wrappers.

Messages carry a ``[key=value ...]`` prefix with the endpoint and, once the
platform has answered, its request id.
"""

import logging
from typing import Optional


class ApiLogger:
    """Structured logger for one endpoint (or the engine itself)."""

    def __init__(self, endpoint: str):
        """
        Initialize logger for an endpoint.

        Args:
            endpoint: Endpoint path or component name (e.g. "/v2/bot/info")
        """
        self.endpoint = endpoint
        self.logger = logging.getLogger("line_api_sdk.api")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"endpoint={self.endpoint}"]

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, request_id: Optional[str] = None, **kwargs):
        self.logger.debug(self._format_message(message, request_id=request_id, **kwargs))

    def info(self, message: str, request_id: Optional[str] = None, **kwargs):
        self.logger.info(self._format_message(message, request_id=request_id, **kwargs))

    def warning(self, message: str, request_id: Optional[str] = None, **kwargs):
        self.logger.warning(self._format_message(message, request_id=request_id, **kwargs))

    def error(self, message: str, request_id: Optional[str] = None,
              error: Optional[Exception] = None, **kwargs):
        """Log error message; ``error`` adds its type and a truncated message."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)[:200]

        self.logger.error(self._format_message(message, request_id=request_id, **kwargs))
