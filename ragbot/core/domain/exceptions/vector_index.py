"""Vector index exceptions for RagBot."""

from .base import RagBotError


class VectorIndexError(RagBotError):
    """Base error for vector index operations."""

    error_code = "RAG_VEC_001"


class DimensionMismatchError(VectorIndexError):
    """Embedding is empty or does not match the index dimensionality."""

    error_code = "RAG_VEC_002"
