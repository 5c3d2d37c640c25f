"""Configuration management for RagBot."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _sanitize_secret(value: str) -> str:
    """Remove BOM characters and whitespace from secrets.

    Secrets copied from dashboards or injected by hosting platforms may
    carry BOM characters that break HTTP headers.
    """
    if not value:
        return value
    return value.lstrip("\ufeff").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Google AI API (completions and embeddings)
    google_api_key: str = ""

    # Notes service (Airtable)
    airtable_token: str = ""
    airtable_base_id: str = ""
    airtable_table_name: str = "Notes"
    airtable_api_url: str = "https://api.airtable.com/v0"

    @field_validator("google_api_key", "airtable_token", "airtable_base_id", mode="after")
    @classmethod
    def sanitize_secrets(cls, value: str) -> str:
        """Remove BOM and whitespace from secret values."""
        return _sanitize_secret(value)

    # Model settings
    llm_model: str = "gemini-2.0-flash"
    llm_temperature: float = 0.0
    llm_max_tokens: int = 1024
    llm_requests_per_minute: int | None = None
    embedding_model: str = "models/text-embedding-004"
    embedding_api_url: str = "https://generativelanguage.googleapis.com/v1beta"
    # 0 lets the index adopt the dimension of the first vector it stores
    embedding_dimension: int = 768

    # Documents and RAG settings
    documents_dir: Path = Path("./data/documents")
    chunk_size: int = 1000
    chunk_overlap: int = 200
    top_k_results: int = 4
    ingest_batch_size: int = 20
    ingest_batch_delay_seconds: float = 1.0
    empty_corpus_policy: Literal["fail", "serve_empty"] = "fail"
    max_question_length: int = 1000

    # Outbound HTTP
    request_timeout_seconds: float = 30.0

    # Intent routing
    scheduling_link: str = ""

    # API
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Path | None = None

    @model_validator(mode="after")
    def check_chunking(self) -> "Settings":
        """Reject chunk parameters the chunker cannot use."""
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if not 0 <= self.chunk_overlap < self.chunk_size:
            raise ValueError("chunk_overlap must be non-negative and less than chunk_size")
        if self.ingest_batch_size <= 0:
            raise ValueError("ingest_batch_size must be positive")
        return self


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
