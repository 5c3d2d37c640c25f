"""
Pytest configuration and shared fixtures.
"""

import re
import threading
import time
import zlib
from pathlib import Path

import pytest

from ragbot.common.rate_limiter import BatchThrottle
from ragbot.core.ports.embedding_port import EmbeddingPort
from ragbot.core.ports.llm_port import LLMPort

EMBEDDING_DIMENSION = 64


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (HTTP app with fakes)")


class HashingEmbedder(EmbeddingPort):
    """Deterministic bag-of-words embedder; records every call it receives."""

    def __init__(self, dimension: int = EMBEDDING_DIMENSION, delay: float = 0.0) -> None:
        self.dimension = dimension
        self.delay = delay
        self.document_calls: list[list[str]] = []
        self.query_calls: list[str] = []
        self._lock = threading.Lock()

    def _vector(self, text: str) -> list[float]:
        vector = [0.0] * self.dimension
        for token in re.findall(r"[a-z]+", text.lower()):
            vector[zlib.crc32(token.encode()) % self.dimension] += 1.0
        return vector

    def embed_query(self, text: str) -> list[float]:
        with self._lock:
            self.query_calls.append(text)
        return self._vector(text)

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        with self._lock:
            self.document_calls.append(list(texts))
        if self.delay:
            time.sleep(self.delay)
        return [self._vector(text) for text in texts]


class ContextEchoLLM(LLMPort):
    """Answers by quoting the first line of the context it was given."""

    def __init__(self, reply: str | None = None) -> None:
        self.reply = reply
        self.prompts: list[str] = []

    def generate(self, prompt, system_prompt=None, temperature=0.0, max_tokens=1024):
        self.prompts.append(prompt)
        if self.reply is not None:
            return self.reply
        context = prompt.split("Context: ", 1)[1].split("\nQuestion:", 1)[0]
        return f"According to the documents: {context.strip().splitlines()[0]}"


@pytest.fixture
def hashing_embedder():
    """Fake embedding service."""
    return HashingEmbedder()


@pytest.fixture
def echo_llm():
    """Fake completion service quoting the retrieved context."""
    return ContextEchoLLM()


@pytest.fixture
def no_wait_throttle():
    """Batch throttle that records pauses instead of sleeping."""
    pauses: list[float] = []
    throttle = BatchThrottle(batch_size=20, delay_seconds=1.0, sleep=pauses.append)
    throttle.pauses = pauses
    return throttle


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Empty documents directory."""
    path = tmp_path / "documents"
    path.mkdir()
    return path


@pytest.fixture
def sleep_doc_dir(docs_dir: Path) -> Path:
    """Directory with the single sleep-advice text file."""
    (docs_dir / "sleep.txt").write_text(
        "Sleep is optimized by consistent circadian timing.", encoding="utf-8"
    )
    return docs_dir


@pytest.fixture
def make_embedder():
    """Factory for fake embedders with custom dimension or latency."""
    return HashingEmbedder
