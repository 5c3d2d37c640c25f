"""Lazily built, process-wide knowledge base.

Owns the vector index and the one-time ingestion run that fills it:
load documents -> split into segments -> embed in throttled batches ->
append to the index.
"""

import logging
import threading
from pathlib import Path
from typing import Any, Literal

from ...common.rate_limiter import BatchThrottle
from ..domain import IndexState
from ..domain.exceptions import NoDocumentsLoadedError
from ..ports.document_source_port import DocumentSourcePort
from ..ports.embedding_port import EmbeddingPort
from .chunker import TextChunker
from .vector_index import InMemoryVectorIndex

logger = logging.getLogger(__name__)

NO_DOCUMENTS_MESSAGE = "No documents were successfully loaded into the vector store"

EmptyCorpusPolicy = Literal["fail", "serve_empty"]


class KnowledgeBase:
    """Builds the vector index at most once and hands it to readers.

    State machine: UNINITIALIZED -> INDEXING -> READY | FAILED.
    READY and FAILED are final for the life of the object unless
    ``invalidate()`` is called. Concurrent first callers block on one lock
    while a single ingestion run executes, then all see its outcome.
    """

    def __init__(
        self,
        loader: DocumentSourcePort,
        chunker: TextChunker,
        embedder: EmbeddingPort,
        documents_dir: Path,
        index: InMemoryVectorIndex | None = None,
        throttle: BatchThrottle | None = None,
        empty_corpus_policy: EmptyCorpusPolicy = "fail",
    ) -> None:
        """Initialize the knowledge base.

        Args:
            loader: Reads documents from ``documents_dir``.
            chunker: Splits documents into segments.
            embedder: Embedding service client.
            documents_dir: Directory holding the corpus.
            index: Index to fill (a fresh one by default).
            throttle: Batch size and pause used while embedding.
            empty_corpus_policy: ``"fail"`` makes an empty corpus a hard
                error for every request; ``"serve_empty"`` serves an empty
                index so answers fall back to the fixed message.
        """
        self.loader = loader
        self.chunker = chunker
        self.embedder = embedder
        self.documents_dir = Path(documents_dir)
        self.index = index if index is not None else InMemoryVectorIndex()
        self.throttle = throttle or BatchThrottle()
        self.empty_corpus_policy = empty_corpus_policy

        self._state = IndexState.UNINITIALIZED
        self._document_count = 0
        self._lock = threading.Lock()
        # Bumped by every ingestion run that ends in an error
        self._failed_runs = 0
        self._last_error: Exception | None = None

    @property
    def state(self) -> IndexState:
        return self._state

    def ensure_ready(self) -> InMemoryVectorIndex:
        """Return the index, building it on the first call.

        Raises:
            NoDocumentsLoadedError: If ingestion found nothing to index.
            TransientServiceError: If an embedding batch failed during the
                ingestion run this call ran or waited on.
        """
        if self._state is IndexState.READY:
            return self.index
        if self._state is IndexState.FAILED:
            raise NoDocumentsLoadedError(NO_DOCUMENTS_MESSAGE)

        failed_runs_seen = self._failed_runs
        with self._lock:
            # Another caller may have finished ingestion while we waited
            if self._state is IndexState.READY:
                return self.index
            if self._state is IndexState.FAILED:
                raise NoDocumentsLoadedError(NO_DOCUMENTS_MESSAGE)
            # A run finished with an error while this caller waited: share its outcome
            if self._failed_runs != failed_runs_seen and self._last_error is not None:
                raise self._last_error

            self._state = IndexState.INDEXING
            try:
                self._build()
            except NoDocumentsLoadedError:
                self._state = IndexState.FAILED
                raise
            except Exception as e:
                self._failed_runs += 1
                self._last_error = e
                if len(self.index) > 0:
                    logger.warning(
                        "Ingestion aborted after %d segments; serving partial index",
                        len(self.index),
                    )
                    self._state = IndexState.READY
                else:
                    self._state = IndexState.UNINITIALIZED
                raise

            self._state = IndexState.READY
            return self.index

    def _build(self) -> None:
        """Run one ingestion pass into ``self.index``."""
        logger.info("Building knowledge base from %s", self.documents_dir)
        documents = self.loader.load(self.documents_dir)
        self._document_count = len(documents)
        segments = self.chunker.split(documents)

        if not segments:
            if self.empty_corpus_policy == "serve_empty":
                logger.warning("No documents found in %s; serving an empty index", self.documents_dir)
                return
            logger.warning("No documents were successfully loaded from %s", self.documents_dir)
            raise NoDocumentsLoadedError(
                NO_DOCUMENTS_MESSAGE, context={"documents_dir": str(self.documents_dir)}
            )

        logger.info(
            "Processing %d segments from %d documents...", len(segments), len(documents)
        )
        for batch in self.throttle.batches(segments):
            embeddings = self.embedder.embed_documents([segment.text for segment in batch])
            self.index.add(embeddings, batch)

        logger.info("Knowledge base ready: %d segments indexed", len(self.index))

    def invalidate(self) -> None:
        """Drop the index so the next ``ensure_ready()`` rebuilds it."""
        with self._lock:
            self.index.clear()
            self._document_count = 0
            self._state = IndexState.UNINITIALIZED
        logger.info("Knowledge base invalidated")

    def stats(self) -> dict[str, Any]:
        """Current state and index size."""
        return {
            "state": self._state.value,
            "documents": self._document_count,
            **self.index.stats(),
        }
