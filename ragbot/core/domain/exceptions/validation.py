"""Validation exceptions for RagBot."""

from .base import RagBotError


class ValidationError(RagBotError):
    """Input validation failed."""

    error_code = "RAG_VAL_001"
    expose_message = True


class MissingFieldError(ValidationError):
    """A required request field is absent or blank."""

    error_code = "RAG_VAL_002"


class EmptyQueryError(ValidationError):
    """Query cannot be empty or whitespace only."""

    error_code = "RAG_VAL_003"


class QueryTooLongError(ValidationError):
    """Query exceeds maximum allowed length."""

    error_code = "RAG_VAL_004"
