"""LLM exceptions for RagBot."""

from .upstream import TransientServiceError


class LLMError(TransientServiceError):
    """Base error for chat-completion operations."""

    error_code = "RAG_LLM_001"


class LLMConnectionError(LLMError):
    """Failed to reach the completion provider.

    Common causes:
    - Invalid API key
    - Network issues or timeout
    - Service unavailable
    """

    error_code = "RAG_LLM_002"


class LLMRateLimitError(LLMError):
    """Rate limit exceeded on the completion provider."""

    error_code = "RAG_LLM_003"


class LLMGenerationError(LLMError):
    """Provider rejected the generation request.

    Common causes:
    - Content filtered by safety settings
    - Token limit exceeded
    - Invalid prompt format
    """

    error_code = "RAG_LLM_004"
