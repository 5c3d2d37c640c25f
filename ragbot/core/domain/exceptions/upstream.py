"""Exceptions for calls to hosted services (embeddings, completions, notes)."""

from typing import Any

from .base import RagBotError


class UpstreamServiceError(RagBotError):
    """A hosted service returned an error or an unusable response.

    ``status_code`` is the HTTP status to hand back to our own client.
    ``None`` means "report a generic 500".
    """

    error_code = "RAG_UPS_001"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, cause=cause, context=context)
        self.status_code = status_code


class TransientServiceError(UpstreamServiceError):
    """Upstream call failed or timed out; the caller may retry."""

    error_code = "RAG_UPS_002"
