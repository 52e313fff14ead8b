"""HTTP request construction for endpoint wrappers."""

from .request import bearer_headers, build_request, request_timeout

__all__ = ["bearer_headers", "build_request", "request_timeout"]
