"""Composition root wiring adapters to the application services."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..adapters.outbound.embeddings.gemini_embeddings import GeminiEmbeddingAdapter
from ..adapters.outbound.llm.gemini_adapter import GeminiAdapter
from ..adapters.outbound.loaders.directory_loader import DirectoryLoader
from ..adapters.outbound.notes.airtable_adapter import AirtableNotesAdapter
from ..common.rate_limiter import BatchThrottle, RateLimiter
from ..config.settings import Settings
from ..core.ports.notes_port import NotesPort
from ..core.services.answer_composer import AnswerComposer
from ..core.services.chat_service import ChatService
from ..core.services.chunker import TextChunker
from ..core.services.intent_router import IntentRouter
from ..core.services.knowledge_base import KnowledgeBase
from ..core.services.retrieval_service import RetrievalService
from ..core.services.vector_index import InMemoryVectorIndex

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """Everything a hosting process (API or CLI) needs, built once."""

    settings: Settings
    knowledge_base: KnowledgeBase
    chat_service: ChatService
    notes: NotesPort
    intent_router: IntentRouter


def build_container(settings: Settings) -> Container:
    """Build all services from settings.

    No network calls happen here: clients connect lazily and the index is
    built on the first question.
    """
    logger.info("Initializing services (composition root)...")
    embedder = GeminiEmbeddingAdapter(
        api_key=settings.google_api_key,
        model_name=settings.embedding_model,
        api_url=settings.embedding_api_url,
        timeout=settings.request_timeout_seconds,
    )
    knowledge_base = KnowledgeBase(
        loader=DirectoryLoader(),
        chunker=TextChunker(settings.chunk_size, settings.chunk_overlap),
        embedder=embedder,
        documents_dir=settings.documents_dir,
        index=InMemoryVectorIndex(dimension=settings.embedding_dimension or None),
        throttle=BatchThrottle(settings.ingest_batch_size, settings.ingest_batch_delay_seconds),
        empty_corpus_policy=settings.empty_corpus_policy,
    )
    llm = GeminiAdapter(
        api_key=settings.google_api_key,
        model=settings.llm_model,
        timeout=settings.request_timeout_seconds,
        rate_limiter=RateLimiter(settings.llm_requests_per_minute),
    )
    chat_service = ChatService(
        retriever=RetrievalService(knowledge_base, embedder, top_k=settings.top_k_results),
        composer=AnswerComposer(
            llm,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
        ),
        max_question_length=settings.max_question_length,
    )
    notes = AirtableNotesAdapter(
        token=settings.airtable_token,
        base_id=settings.airtable_base_id,
        table_name=settings.airtable_table_name,
        api_url=settings.airtable_api_url,
        timeout=settings.request_timeout_seconds,
    )
    return Container(
        settings=settings,
        knowledge_base=knowledge_base,
        chat_service=chat_service,
        notes=notes,
        intent_router=IntentRouter(scheduling_link=settings.scheduling_link),
    )
