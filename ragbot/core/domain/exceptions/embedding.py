"""Embedding exceptions for RagBot."""

from .upstream import TransientServiceError


class EmbeddingError(TransientServiceError):
    """Failed to generate embeddings."""

    error_code = "RAG_EMB_001"


class EmbeddingAPIError(EmbeddingError):
    """Embedding API returned an error."""

    error_code = "RAG_EMB_002"


class EmbeddingRateLimitError(EmbeddingError):
    """Embedding API rate limit exceeded."""

    error_code = "RAG_EMB_003"


class EmbeddingTimeoutError(EmbeddingError):
    """Embedding API did not answer within the configured timeout."""

    error_code = "RAG_EMB_004"


class EmbeddingResponseError(EmbeddingError):
    """Embedding API answered with a malformed body.

    Common causes:
    - Body is not JSON
    - Number of vectors differs from number of inputs
    - A vector is empty
    """

    error_code = "RAG_EMB_005"
