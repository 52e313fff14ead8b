"""
Error taxonomy for LINE API calls.

Every failure the execution engine can report is a subclass of
LineApiError, so callers can catch one type and still log a complete,
serializable diagnostic through ``to_dict()``.
"""

from typing import Any, Dict, Optional

from ..models.error_response import ErrorResponse
from ..models.metadata import ResponseMetadata


class LineApiError(Exception):
    """
    Base exception for LINE API failures.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code if a response was received
        metadata: Platform request identifiers if a response was received
        attempts: Number of attempts the engine made before giving up
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        metadata: Optional[ResponseMetadata] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.metadata = metadata
        self.attempts = 1

    def to_dict(self) -> Dict[str, Any]:
        """Project the error to a JSON-serializable dict for logs and metrics."""
        result: Dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "attempts": self.attempts,
        }
        if self.status_code is not None:
            result["status_code"] = self.status_code
        if self.metadata is not None:
            result["metadata"] = self.metadata.to_dict()
        return result


class ConfigurationError(LineApiError):
    """Invalid caller input, rejected before any network call."""

    def __init__(self, message: str):
        super().__init__(message)


class TransportError(LineApiError):
    """The request could not be sent or no response was received."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.original_error is not None:
            result["original_error"] = type(self.original_error).__name__
        return result


class DeadlineExceededError(TransportError):
    """The caller's deadline for the whole call elapsed."""

    def __init__(self, deadline: float, attempts: int = 1):
        super().__init__(f"Deadline of {deadline}s exceeded")
        self.deadline = deadline
        self.attempts = attempts

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["deadline"] = self.deadline
        return result


class MalformedResponseError(LineApiError):
    """A response arrived but its body is not JSON."""

    def __init__(self, status_code: int, text: str, metadata: ResponseMetadata):
        super().__init__(
            f"Non-JSON response body (status {status_code})",
            status_code=status_code,
            metadata=metadata
        )
        self.text = text

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["text"] = self.text[:500]
        return result


class StructuredApiError(LineApiError):
    """The platform answered with its documented error body."""

    def __init__(self, status_code: int, error_response: ErrorResponse, metadata: ResponseMetadata):
        super().__init__(error_response.message, status_code=status_code, metadata=metadata)
        self.error_response = error_response

    @property
    def details(self):
        return self.error_response.details

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["error_response"] = self.error_response.model_dump(exclude_none=True)
        return result


class UnstructuredJsonError(LineApiError):
    """The platform answered with JSON that is neither the target type nor the error schema."""

    def __init__(self, status_code: int, payload: Any, metadata: ResponseMetadata):
        super().__init__(
            f"Unexpected JSON response (status {status_code})",
            status_code=status_code,
            metadata=metadata
        )
        self.payload = payload

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["payload"] = self.payload
        return result
