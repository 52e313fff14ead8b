"""Data models for LINE API SDK."""

from .base import LineModel, CamelModel
from .error_response import ErrorDetail, ErrorResponse
from .metadata import ResponseMetadata
from .options import ExecutionOptions

__all__ = [
    "LineModel",
    "CamelModel",
    "ErrorDetail",
    "ErrorResponse",
    "ResponseMetadata",
    "ExecutionOptions",
]
