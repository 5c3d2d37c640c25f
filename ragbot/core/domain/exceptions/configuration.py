"""Configuration-related exceptions for RagBot."""

from .base import RagBotError


class ConfigurationError(RagBotError):
    """Configuration or environment variable errors.

    Raised when required configuration is missing or invalid.
    """

    error_code = "RAG_CFG_001"


class MissingAPIKeyError(ConfigurationError):
    """Required API key or token is not configured."""

    error_code = "RAG_CFG_002"


class InvalidConfigurationError(ConfigurationError):
    """Configuration value is invalid."""

    error_code = "RAG_CFG_003"
