from typing import List, Optional

from .base import LineModel


class ErrorDetail(LineModel):
    """A field-level validation failure reported by the platform."""
    message: str
    property: str


class ErrorResponse(LineModel):
    """
    Documented error body of the LINE platform.

    Fields outside ``message``/``details`` are kept as extras so that nothing
    the platform sends is lost when the error is logged or re-serialized.
    """
    message: str
    details: Optional[List[ErrorDetail]] = None
