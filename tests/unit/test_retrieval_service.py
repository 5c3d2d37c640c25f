"""Unit tests for query-time retrieval."""

from unittest.mock import MagicMock

import pytest

from ragbot.adapters.outbound.loaders.directory_loader import DirectoryLoader
from ragbot.common.rate_limiter import BatchThrottle
from ragbot.core.services.chunker import TextChunker
from ragbot.core.services.knowledge_base import KnowledgeBase
from ragbot.core.services.retrieval_service import RetrievalService

pytestmark = pytest.mark.unit


def _kb(directory, embedder, policy="fail"):
    return KnowledgeBase(
        loader=DirectoryLoader(),
        chunker=TextChunker(60, 10),
        embedder=embedder,
        documents_dir=directory,
        throttle=BatchThrottle(delay_seconds=0),
        empty_corpus_policy=policy,
    )


class TestRetrievalService:
    def test_most_relevant_segment_first(self, docs_dir, hashing_embedder):
        (docs_dir / "sleep.txt").write_text("Sleep is optimized by consistent circadian timing.", encoding="utf-8")
        (docs_dir / "food.txt").write_text("Protein at breakfast keeps you full until lunch.", encoding="utf-8")
        service = RetrievalService(_kb(docs_dir, hashing_embedder), hashing_embedder, top_k=2)

        result = service.retrieve("How is sleep optimized?")

        assert len(result) == 2
        assert result.matches[0].segment.source_id == "sleep.txt"
        assert result.matches[0].score >= result.matches[1].score
        assert hashing_embedder.query_calls == ["How is sleep optimized?"]

    def test_top_k_override(self, sleep_doc_dir, hashing_embedder):
        service = RetrievalService(_kb(sleep_doc_dir, hashing_embedder), hashing_embedder, top_k=4)
        assert len(service.retrieve("sleep", top_k=0)) == 0

    def test_empty_index_skips_query_embedding(self, docs_dir):
        embedder = MagicMock()
        service = RetrievalService(_kb(docs_dir, embedder, policy="serve_empty"), embedder)

        result = service.retrieve("anything")

        assert result.is_empty
        embedder.embed_query.assert_not_called()

    def test_first_retrieval_builds_index(self, sleep_doc_dir, hashing_embedder):
        kb = _kb(sleep_doc_dir, hashing_embedder)
        service = RetrievalService(kb, hashing_embedder)

        service.retrieve("circadian")
        service.retrieve("timing")

        assert len(hashing_embedder.document_calls) == 1
