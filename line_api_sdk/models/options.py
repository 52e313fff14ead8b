"""Configuration options for the execution engine."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from ..config.constants import (
    MAX_ATTEMPTS_ENV_VAR,
    REQUEST_TIMEOUT_ENV_VAR,
    RETRY_BASE_DELAY_ENV_VAR,
)


class ExecutionOptions(BaseModel):
    """
    Per-call options for the execution engine.

    Instances are frozen so one value can be shared by concurrent calls.
    """
    model_config = ConfigDict(frozen=True)

    base_url_override: Optional[str] = Field(
        default=None,
        description="Replaces the default API host (and LINE_API_PREFIX_URL)"
    )
    request_timeout: float = Field(
        default=0.0,
        ge=0.0,
        description="Per-attempt timeout in seconds; 0 uses the transport default"
    )
    max_attempts: int = Field(
        default=1,
        ge=0,
        le=255,
        description="Total attempts per call; 0 or 1 disables retries"
    )
    retry_base_delay: float = Field(
        default=0.0,
        ge=0.0,
        description="Base backoff in seconds; 0 retries without waiting"
    )

    @property
    def attempt_limit(self) -> int:
        """Number of attempts the engine will actually make (at least one)."""
        return max(self.max_attempts, 1)

    @property
    def retries_enabled(self) -> bool:
        return self.attempt_limit > 1

    @classmethod
    def from_env(cls, **overrides) -> "ExecutionOptions":
        """Build options from LINE_* environment variables (and a .env file)."""
        load_dotenv()
        values = {}
        if os.getenv(MAX_ATTEMPTS_ENV_VAR):
            values["max_attempts"] = int(os.getenv(MAX_ATTEMPTS_ENV_VAR))
        if os.getenv(RETRY_BASE_DELAY_ENV_VAR):
            values["retry_base_delay"] = float(os.getenv(RETRY_BASE_DELAY_ENV_VAR))
        if os.getenv(REQUEST_TIMEOUT_ENV_VAR):
            values["request_timeout"] = float(os.getenv(REQUEST_TIMEOUT_ENV_VAR))
        values.update(overrides)
        return cls(**values)
