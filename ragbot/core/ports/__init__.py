"""Ports (abstract interfaces) implemented by outbound adapters."""

from .document_source_port import DocumentSourcePort
from .embedding_port import EmbeddingPort
from .llm_port import LLMPort
from .notes_port import NotesPort

__all__ = ["DocumentSourcePort", "EmbeddingPort", "LLMPort", "NotesPort"]
