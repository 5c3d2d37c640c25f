"""Custom exception hierarchy for RagBot.

Each exception includes:
- Error codes for quick identification
- Automatic capture of class, method, file, and line number
- Cause chaining for underlying exceptions
- JSON serialization for structured logging

Import from this package directly:

    from ragbot.core.domain.exceptions import RagBotError, NoAnswerError
"""

# Base classes
from .base import ExceptionContext, RagBotError

# Configuration exceptions
from .configuration import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingAPIKeyError,
)

# Data ingestion exceptions
from .data_ingestion import (
    DataIngestionError,
    DocumentLoadError,
    PDFExtractionError,
)

# Embedding exceptions
from .embedding import (
    EmbeddingAPIError,
    EmbeddingError,
    EmbeddingRateLimitError,
    EmbeddingResponseError,
    EmbeddingTimeoutError,
)

# LLM exceptions
from .llm import (
    LLMConnectionError,
    LLMError,
    LLMGenerationError,
    LLMRateLimitError,
)

# Notes exceptions
from .notes import NotesResponseError, NotesServiceError

# Retrieval exceptions
from .retrieval import (
    NoAnswerError,
    NoDocumentsLoadedError,
    RetrievalError,
)

# Upstream exceptions
from .upstream import TransientServiceError, UpstreamServiceError

# Validation exceptions
from .validation import (
    EmptyQueryError,
    MissingFieldError,
    QueryTooLongError,
    ValidationError,
)

# Vector index exceptions
from .vector_index import DimensionMismatchError, VectorIndexError

__all__ = [
    # Base
    "ExceptionContext",
    "RagBotError",
    # Configuration
    "ConfigurationError",
    "MissingAPIKeyError",
    "InvalidConfigurationError",
    # Upstream
    "UpstreamServiceError",
    "TransientServiceError",
    # Embedding
    "EmbeddingError",
    "EmbeddingAPIError",
    "EmbeddingRateLimitError",
    "EmbeddingTimeoutError",
    "EmbeddingResponseError",
    # LLM
    "LLMError",
    "LLMConnectionError",
    "LLMRateLimitError",
    "LLMGenerationError",
    # Notes
    "NotesServiceError",
    "NotesResponseError",
    # Data Ingestion
    "DataIngestionError",
    "DocumentLoadError",
    "PDFExtractionError",
    # Validation
    "ValidationError",
    "MissingFieldError",
    "EmptyQueryError",
    "QueryTooLongError",
    # Retrieval
    "RetrievalError",
    "NoAnswerError",
    "NoDocumentsLoadedError",
    # Vector index
    "VectorIndexError",
    "DimensionMismatchError",
]
