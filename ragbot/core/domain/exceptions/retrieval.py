"""Retrieval exceptions for RagBot."""

from .base import RagBotError


class RetrievalError(RagBotError):
    """Error during document retrieval."""

    error_code = "RAG_RET_001"


class NoAnswerError(RetrievalError):
    """The pipeline produced no answer for the question."""

    error_code = "RAG_RET_002"
    expose_message = True


class NoDocumentsLoadedError(RetrievalError):
    """Ingestion found nothing to index; chat is unavailable until restart."""

    error_code = "RAG_RET_003"
    expose_message = True
