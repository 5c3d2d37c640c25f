"""Data ingestion exceptions for RagBot."""

from .base import RagBotError


class DataIngestionError(RagBotError):
    """Error while loading source documents."""

    error_code = "RAG_DAT_001"


class DocumentLoadError(DataIngestionError):
    """A single file could not be read."""

    error_code = "RAG_DAT_002"


class PDFExtractionError(DocumentLoadError):
    """Failed to extract text from PDF."""

    error_code = "RAG_DAT_003"
