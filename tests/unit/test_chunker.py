"""Unit tests for the sliding-window chunker."""

import math

import pytest

from ragbot.core.domain import Document
from ragbot.core.domain.exceptions import InvalidConfigurationError
from ragbot.core.services.chunker import TextChunker

pytestmark = pytest.mark.unit


def _expected_count(length: int, size: int, overlap: int) -> int:
    if length == 0:
        return 0
    if length <= size:
        return 1
    return math.ceil((length - overlap) / (size - overlap))


class TestChunkerParameters:
    """Tests for parameter validation."""

    @pytest.mark.parametrize("size,overlap", [(0, 0), (-5, 0), (10, 10), (10, 12), (10, -1)])
    def test_invalid_parameters_rejected(self, size, overlap):
        with pytest.raises(InvalidConfigurationError):
            TextChunker(size, overlap)

    def test_zero_overlap_allowed(self):
        chunker = TextChunker(10, 0)
        assert chunker.split_text("a" * 25) == ["a" * 10, "a" * 10, "a" * 5]


class TestSplitText:
    """Tests for window boundaries."""

    @pytest.mark.parametrize(
        "length,size,overlap",
        [(0, 10, 3), (1, 10, 3), (10, 10, 3), (11, 10, 3), (17, 10, 3), (100, 10, 3), (999, 100, 20)],
    )
    def test_segment_count(self, length, size, overlap):
        text = "".join(chr(97 + i % 26) for i in range(length))
        chunks = TextChunker(size, overlap).split_text(text)
        assert len(chunks) == _expected_count(length, size, overlap)

    def test_consecutive_segments_overlap_exactly(self):
        text = "".join(chr(97 + i % 26) for i in range(137))
        chunks = TextChunker(20, 6).split_text(text)

        for previous, current in zip(chunks, chunks[1:]):
            assert previous[-6:] == current[:6]

    def test_reconstructs_original_text(self):
        text = "The quick brown fox jumps over the lazy dog. " * 7
        chunks = TextChunker(30, 8).split_text(text)

        rebuilt = chunks[0] + "".join(chunk[8:] for chunk in chunks[1:])
        assert rebuilt == text

    def test_short_text_is_single_segment(self):
        assert TextChunker(1000, 200).split_text("short") == ["short"]

    def test_all_but_last_segment_are_full_size(self):
        chunks = TextChunker(10, 4).split_text("x" * 33)
        assert all(len(chunk) == 10 for chunk in chunks[:-1])
        assert 0 < len(chunks[-1]) <= 10


class TestSplitDocuments:
    """Tests for segment metadata and ordering."""

    def test_segments_keep_source_offset_and_order(self):
        documents = [
            Document(text="a" * 25, source_id="first.txt"),
            Document(text="b" * 12, source_id="second.pdf", page_number=3),
        ]
        segments = TextChunker(10, 2).split(documents)

        assert [(s.source_id, s.offset, s.chunk_index) for s in segments] == [
            ("first.txt", 0, 0),
            ("first.txt", 8, 1),
            ("first.txt", 16, 2),
            ("second.pdf", 0, 0),
            ("second.pdf", 8, 1),
        ]
        assert segments[-1].page_number == 3
        assert segments[0].page_number is None

    def test_segment_text_matches_offset(self):
        document = Document(text="0123456789abcdefghij", source_id="d.txt")
        for segment in TextChunker(7, 3).split([document]):
            assert document.text[segment.offset : segment.offset + len(segment.text)] == segment.text

    def test_deterministic(self):
        documents = [Document(text="lorem ipsum dolor sit amet " * 20, source_id="l.txt")]
        chunker = TextChunker(50, 10)
        assert chunker.split(documents) == chunker.split(documents)

    def test_empty_input(self):
        assert TextChunker().split([]) == []
