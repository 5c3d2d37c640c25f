"""Query-time retrieval over the knowledge base."""

import logging

from ..domain import RetrievalResult
from ..ports.embedding_port import EmbeddingPort
from .knowledge_base import KnowledgeBase

logger = logging.getLogger(__name__)


class RetrievalService:
    """Embeds a question and returns the closest stored segments."""

    def __init__(
        self,
        knowledge_base: KnowledgeBase,
        embedder: EmbeddingPort,
        top_k: int = 4,
    ) -> None:
        """Initialize the retriever.

        Args:
            knowledge_base: Owner of the (lazily built) vector index.
            embedder: Embedding service used for the query.
            top_k: Default number of segments to return.
        """
        self.knowledge_base = knowledge_base
        self.embedder = embedder
        self.top_k = top_k

    def retrieve(self, query: str, top_k: int | None = None) -> RetrievalResult:
        """Retrieve the most similar segments for a query.

        Builds the index first if this is the first retrieval.

        Args:
            query: The user question.
            top_k: Number of segments, defaults to the configured value.

        Returns:
            RetrievalResult ordered by descending similarity.
        """
        k = top_k if top_k is not None else self.top_k
        index = self.knowledge_base.ensure_ready()
        if len(index) == 0:
            return RetrievalResult(query=query)

        query_embedding = self.embedder.embed_query(query)
        matches = index.query(query_embedding, k)
        logger.debug(
            "Retrieved %d segments (best score %.3f)",
            len(matches),
            matches[0].score if matches else 0.0,
        )
        return RetrievalResult(query=query, matches=matches)
