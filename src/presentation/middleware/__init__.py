"""
Middleware for request processing.

RequestContextMiddleware must wrap LoggingMiddleware so every log line
and metric for a request sees its request ID.
"""

from .error_handler import error_handler_middleware
from .logging import LoggingMiddleware
from .request_context import RequestContextMiddleware, get_request_id

__all__ = [
    "error_handler_middleware",
    "get_request_id",
    "LoggingMiddleware",
    "RequestContextMiddleware",
]
