"""Common utilities shared across layers.

Error formatting/mapping and flow control for calls to hosted APIs.
"""

from .exception_handler import (
    build_error_response,
    format_exception_json,
    get_http_status_code,
    log_exception,
)
from .rate_limiter import BatchThrottle, RateLimiter

__all__ = [
    # Flow control
    "RateLimiter",
    "BatchThrottle",
    # Exception handlers
    "format_exception_json",
    "log_exception",
    "get_http_status_code",
    "build_error_response",
]
