"""Document, segment and search result models for the RAG pipeline."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Document:
    """Raw text read from one source file (or one PDF page).

    Attributes:
        text: Cleaned text content.
        source_id: File name the text came from.
        page_number: 1-based page number for PDF pages, None for text files.
    """

    text: str
    source_id: str
    page_number: int | None = None


@dataclass(frozen=True)
class Segment:
    """A window of a document's text used as the retrieval unit.

    Attributes:
        text: The window text.
        source_id: File name of the parent document.
        offset: Character offset of the window inside the parent text.
        page_number: Page of the parent document, if any.
        chunk_index: Position of the window within its parent document.
    """

    text: str
    source_id: str
    offset: int
    page_number: int | None = None
    chunk_index: int = 0

    @property
    def citation(self) -> str:
        """Short human-readable source label."""
        if self.page_number is not None:
            return f"{self.source_id} (page {self.page_number})"
        return self.source_id


@dataclass(frozen=True)
class IndexEntry:
    """One stored (embedding, segment) pair."""

    embedding: tuple[float, ...]
    segment: Segment


@dataclass(frozen=True)
class ScoredSegment:
    """A search hit: the stored segment and its cosine similarity."""

    segment: Segment
    score: float


@dataclass
class RetrievalResult:
    """Segments retrieved for a query, best match first.

    Attributes:
        query: The question the segments were retrieved for.
        matches: Hits sorted by descending similarity.
    """

    query: str
    matches: list[ScoredSegment] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.matches)

    @property
    def is_empty(self) -> bool:
        return not self.matches

    def get_combined_context(self) -> str:
        """Join the segment texts, in result order, into one context block."""
        return "\n\n".join(match.segment.text for match in self.matches)
