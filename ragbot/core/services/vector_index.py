"""In-memory vector index with brute-force cosine search.

The corpus is a handful of local files, so a linear scan over a numpy
matrix is enough. Vectors are L2-normalized on insert and the query is a
single matrix-vector product.
"""

import logging
import threading
from collections.abc import Iterable, Sequence

import numpy as np

from ..domain import IndexEntry, ScoredSegment, Segment
from ..domain.exceptions import DimensionMismatchError

logger = logging.getLogger(__name__)


def _normalize(vector: np.ndarray) -> np.ndarray:
    """Scale to unit length; zero vectors stay zero (similarity 0)."""
    norm = np.linalg.norm(vector)
    if norm == 0:
        return vector
    return vector / norm


class InMemoryVectorIndex:
    """Append-only store of (embedding, segment) pairs."""

    def __init__(self, dimension: int | None = None) -> None:
        """Initialize an empty index.

        Args:
            dimension: Expected embedding size. ``None`` adopts the size of
                the first embedding added.
        """
        self._dimension = dimension if dimension else None
        self._rows: list[np.ndarray] = []
        self._segments: list[Segment] = []
        self._matrix: np.ndarray | None = None
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._segments)

    @property
    def dimension(self) -> int | None:
        return self._dimension

    def _validate(self, embedding: Sequence[float], dimension: int | None) -> np.ndarray:
        vector = np.asarray(embedding, dtype=np.float32)
        if vector.ndim != 1 or vector.size == 0:
            raise DimensionMismatchError(
                "Embedding must be a non-empty vector", context={"shape": list(vector.shape)}
            )
        if dimension is not None and vector.size != dimension:
            raise DimensionMismatchError(
                "Embedding dimension does not match the index",
                context={"expected": dimension, "actual": int(vector.size)},
            )
        return vector

    def add_entries(self, entries: Iterable[IndexEntry]) -> int:
        """Append entries to the index.

        The whole call is validated before anything is stored, so a
        rejected call leaves the index unchanged.

        Args:
            entries: Entries to add.

        Returns:
            Number of entries added.

        Raises:
            DimensionMismatchError: If an embedding is empty or the wrong size.
        """
        entries = list(entries)
        if not entries:
            return 0

        with self._lock:
            dimension = self._dimension
            rows = []
            for entry in entries:
                vector = self._validate(entry.embedding, dimension)
                dimension = vector.size
                rows.append(_normalize(vector))

            self._dimension = dimension
            self._rows.extend(rows)
            self._segments.extend(entry.segment for entry in entries)
            self._matrix = None

        logger.debug("Indexed %d entries (total %d)", len(entries), len(self._segments))
        return len(entries)

    def add(self, embeddings: Sequence[Sequence[float]], segments: Sequence[Segment]) -> int:
        """Append parallel lists of embeddings and segments."""
        if len(embeddings) != len(segments):
            raise DimensionMismatchError(
                "Got a different number of embeddings and segments",
                context={"embeddings": len(embeddings), "segments": len(segments)},
            )
        return self.add_entries(
            IndexEntry(embedding=tuple(float(x) for x in emb), segment=seg)
            for emb, seg in zip(embeddings, segments)
        )

    def _get_matrix(self) -> np.ndarray:
        with self._lock:
            if self._matrix is None or len(self._matrix) != len(self._rows):
                self._matrix = np.vstack(self._rows)
            return self._matrix

    def query(self, embedding: Sequence[float], k: int = 4) -> list[ScoredSegment]:
        """Return the ``k`` most similar segments, best first.

        Ties keep insertion order. An empty index returns an empty list.

        Args:
            embedding: Query vector.
            k: Maximum number of results.

        Raises:
            DimensionMismatchError: If the query vector has the wrong size.
        """
        if not self._segments or k <= 0:
            return []

        query_vector = _normalize(self._validate(embedding, self._dimension))
        scores = self._get_matrix() @ query_vector
        # Stable sort on the negated scores keeps earlier entries first on ties
        order = np.argsort(-scores, kind="stable")[:k]
        return [ScoredSegment(segment=self._segments[i], score=float(scores[i])) for i in order]

    def clear(self) -> None:
        """Drop all entries. The configured dimension is kept."""
        with self._lock:
            self._rows.clear()
            self._segments.clear()
            self._matrix = None

    def stats(self) -> dict[str, int | None]:
        """Entry count and embedding dimension."""
        return {"segments": len(self._segments), "dimension": self._dimension}
