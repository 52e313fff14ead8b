from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from ..config.constants import HEADER_ACCEPTED_REQUEST_ID, HEADER_REQUEST_ID


class ResponseMetadata(BaseModel):
    """
    Request-tracing identifiers the platform attaches to every response.

    ``request_id`` is empty when the header was missing. ``accepted_request_id``
    is only present on responses to requests that were accepted earlier
    (retried push messages).
    """
    model_config = ConfigDict(frozen=True)

    request_id: str = ""
    accepted_request_id: Optional[str] = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "ResponseMetadata":
        """Read the tracing headers; ``headers`` must be case-insensitive (httpx.Headers)."""
        return cls(
            request_id=headers.get(HEADER_REQUEST_ID) or "",
            accepted_request_id=headers.get(HEADER_ACCEPTED_REQUEST_ID),
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
