"""Sliding-window text chunker."""

import logging
from collections.abc import Iterable

from ..domain import Document, Segment
from ..domain.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


class TextChunker:
    """Splits documents into fixed-size, overlapping character windows.

    Each window is ``chunk_size`` characters long and starts
    ``chunk_size - chunk_overlap`` characters after the previous one; the
    last window is cut at the end of the text. Dropping the first
    ``chunk_overlap`` characters of every window after the first and
    concatenating gives back the original text.
    """

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 200) -> None:
        """Initialize the chunker.

        Args:
            chunk_size: Window size in characters (must be positive).
            chunk_overlap: Characters shared by consecutive windows
                (must be less than chunk_size).

        Raises:
            InvalidConfigurationError: If the parameters are out of range.
        """
        if chunk_size <= 0:
            raise InvalidConfigurationError(
                "chunk_size must be positive", context={"chunk_size": chunk_size}
            )
        if chunk_overlap < 0 or chunk_overlap >= chunk_size:
            raise InvalidConfigurationError(
                "chunk_overlap must be non-negative and less than chunk_size",
                context={"chunk_size": chunk_size, "chunk_overlap": chunk_overlap},
            )
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    @property
    def stride(self) -> int:
        return self.chunk_size - self.chunk_overlap

    def window_offsets(self, length: int) -> list[int]:
        """Start offsets of the windows covering a text of ``length`` chars."""
        offsets = []
        start = 0
        while start < length:
            offsets.append(start)
            if start + self.chunk_size >= length:
                break
            start += self.stride
        return offsets

    def split_text(self, text: str) -> list[str]:
        """Split raw text into overlapping windows."""
        return [text[start : start + self.chunk_size] for start in self.window_offsets(len(text))]

    def split(self, documents: Iterable[Document]) -> list[Segment]:
        """Split documents into segments, keeping document then offset order.

        Args:
            documents: Documents to split.

        Returns:
            Segments tagged with their source, offset and page.
        """
        segments: list[Segment] = []
        for document in documents:
            for chunk_index, start in enumerate(self.window_offsets(len(document.text))):
                segments.append(
                    Segment(
                        text=document.text[start : start + self.chunk_size],
                        source_id=document.source_id,
                        offset=start,
                        page_number=document.page_number,
                        chunk_index=chunk_index,
                    )
                )
        logger.debug("Split documents into %d segments", len(segments))
        return segments
