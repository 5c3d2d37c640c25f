"""Exception handling utilities for consistent error formatting.

Formats exceptions as structured JSON, logs them, and maps them to the
HTTP status and client-safe message the API returns.
"""

import json
import logging
import traceback
from typing import Any

from ..core.domain.exceptions import (
    EmbeddingRateLimitError,
    LLMRateLimitError,
    NoAnswerError,
    RagBotError,
    UpstreamServiceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Failed to process your request"


def format_exception_json(
    exc: Exception,
    include_trace: bool = False,
    extra_context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Format any exception as structured JSON.

    Works with both RagBotError and standard Python exceptions.

    Args:
        exc: The exception to format.
        include_trace: If True, include full stack trace.
        extra_context: Additional context to include in output.

    Returns:
        Dictionary with structured error information.
    """
    if isinstance(exc, RagBotError):
        result = exc.to_dict(include_trace=include_trace)
        if extra_context:
            result.setdefault("context", {}).update(extra_context)
        return result

    tb = traceback.extract_tb(exc.__traceback__) if exc.__traceback__ else []
    last_frame = tb[-1] if tb else None

    result: dict[str, Any] = {
        "error": {
            "type": type(exc).__name__,
            "code": "PYTHON_ERR",
            "message": str(exc),
        },
        "location": {
            "class": "<unknown>",
            "method": last_frame.name if last_frame else "<unknown>",
            "file": (
                last_frame.filename.split("\\")[-1].split("/")[-1] if last_frame else "<unknown>"
            ),
            "line": last_frame.lineno if last_frame else 0,
        },
    }

    if extra_context:
        result["context"] = extra_context

    if include_trace:
        result["stack_trace"] = [
            line.strip()
            for line in traceback.format_exception(type(exc), exc, exc.__traceback__)
            if line.strip()
        ]

    return result


def log_exception(
    exc: Exception,
    log: logging.Logger | None = None,
    level: int = logging.ERROR,
    extra_context: dict[str, Any] | None = None,
) -> None:
    """Log exception in structured JSON format.

    Args:
        exc: The exception to log.
        log: Logger instance to use (defaults to module logger).
        level: Logging level (default: ERROR).
        extra_context: Additional context to include.
    """
    log_instance = log or logger

    exc_data = format_exception_json(exc, include_trace=True, extra_context=extra_context)
    log_instance.log(level, json.dumps(exc_data, indent=2, default=str))


def get_error_code(exc: Exception) -> str:
    """Get the error code from an exception.

    Returns:
        Error code string (e.g., "RAG_VAL_003" or "PYTHON_ERR").
    """
    if isinstance(exc, RagBotError):
        return exc.error_code
    return "PYTHON_ERR"


def get_http_status_code(exc: Exception) -> int:
    """Map exception type to appropriate HTTP status code.

    Args:
        exc: The exception to map.

    Returns:
        HTTP status code (400, 404, 429, 500, or the upstream status).
    """
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, NoAnswerError):
        return 404
    if isinstance(exc, LLMRateLimitError | EmbeddingRateLimitError):
        return 429
    if isinstance(exc, UpstreamServiceError) and exc.status_code:
        return exc.status_code
    return 500


def get_client_message(exc: Exception) -> str:
    """Message safe to return to API clients.

    Only exceptions that opt in with ``expose_message`` reveal their text;
    everything else gets the generic message.
    """
    if isinstance(exc, RagBotError) and exc.expose_message:
        return exc.message
    return GENERIC_ERROR_MESSAGE


def build_error_response(exc: Exception, include_details: bool = False) -> dict[str, Any]:
    """Build the JSON body for an error response.

    Args:
        exc: The exception being reported.
        include_details: If True (debug mode), attach the structured
            exception with its stack trace.

    Returns:
        ``{"error": <message>, "code": <code>}`` plus optional ``details``.
    """
    body: dict[str, Any] = {
        "error": get_client_message(exc),
        "code": get_error_code(exc),
    }
    if include_details:
        body["details"] = format_exception_json(exc, include_trace=True)
    return body
