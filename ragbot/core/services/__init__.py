"""Core services: ingestion, retrieval, answer composition and routing."""

from .answer_composer import AnswerComposer
from .chat_service import ChatService
from .chunker import TextChunker
from .intent_router import IntentRouter, default_rules
from .knowledge_base import KnowledgeBase
from .retrieval_service import RetrievalService
from .vector_index import InMemoryVectorIndex

__all__ = [
    "AnswerComposer",
    "ChatService",
    "TextChunker",
    "IntentRouter",
    "default_rules",
    "KnowledgeBase",
    "RetrievalService",
    "InMemoryVectorIndex",
]
