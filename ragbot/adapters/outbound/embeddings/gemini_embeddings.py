"""Gemini embedding adapter over the REST ``batchEmbedContents`` endpoint."""

import logging
from typing import Any

import requests

from ....core.domain.exceptions import (
    EmbeddingAPIError,
    EmbeddingRateLimitError,
    EmbeddingResponseError,
    EmbeddingTimeoutError,
    MissingAPIKeyError,
)
from ....core.ports.embedding_port import EmbeddingPort

logger = logging.getLogger(__name__)

# Upper bound on texts per batchEmbedContents request
MAX_TEXTS_PER_REQUEST = 100


class GeminiEmbeddingAdapter(EmbeddingPort):
    """Embeds text with a Gemini embedding model.

    One HTTP request per (up to) 100 texts, a bounded timeout, and no
    retries: failures surface as ``EmbeddingError`` subclasses and the
    caller decides what to do.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = "models/text-embedding-004",
        api_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 30.0,
    ) -> None:
        """Initialize the adapter.

        Args:
            api_key: Google AI API key.
            model_name: Embedding model resource name.
            api_url: Base URL of the Generative Language API.
            timeout: Per-request timeout in seconds.
        """
        self.api_key = api_key
        self.model_name = model_name
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}/{self.model_name}:batchEmbedContents"

    def embed_query(self, text: str) -> list[float]:
        """Generate embedding for a single query text."""
        return self._embed_texts([text], task_type="RETRIEVAL_QUERY")[0]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for multiple documents."""
        return self._embed_texts(texts, task_type="RETRIEVAL_DOCUMENT")

    def _embed_texts(self, texts: list[str], task_type: str) -> list[list[float]]:
        if not texts:
            return []
        if not self.api_key:
            raise MissingAPIKeyError("GOOGLE_API_KEY is not set; embeddings are unavailable")

        embeddings: list[list[float]] = []
        for i in range(0, len(texts), MAX_TEXTS_PER_REQUEST):
            batch = texts[i : i + MAX_TEXTS_PER_REQUEST]
            embeddings.extend(self._post_batch(batch, task_type))
        return embeddings

    def _post_batch(self, texts: list[str], task_type: str) -> list[list[float]]:
        payload = {
            "requests": [
                {
                    "model": self.model_name,
                    "content": {"parts": [{"text": text}]},
                    "taskType": task_type,
                }
                for text in texts
            ]
        }
        context = {"model": self.model_name, "batch_size": len(texts)}

        try:
            response = requests.post(
                self.endpoint,
                json=payload,
                headers={"x-goog-api-key": self.api_key},
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise EmbeddingTimeoutError(
                f"Embedding request timed out after {self.timeout}s", cause=e, context=context
            ) from e
        except requests.RequestException as e:
            raise EmbeddingAPIError("Embedding request failed", cause=e, context=context) from e

        if response.status_code == 429:
            raise EmbeddingRateLimitError(
                "Embedding API rate limit exceeded", context={**context, "status": 429}
            )
        if not response.ok:
            raise EmbeddingAPIError(
                "Embedding API returned an error",
                context={**context, "status": response.status_code},
            )

        return self._parse(response, len(texts), context)

    @staticmethod
    def _parse(response: requests.Response, expected: int, context: dict[str, Any]) -> list[list[float]]:
        try:
            data = response.json()
        except ValueError as e:
            raise EmbeddingResponseError(
                "Embedding API returned invalid JSON", cause=e, context=context
            ) from e

        items = data.get("embeddings") if isinstance(data, dict) else None
        if not isinstance(items, list) or len(items) != expected:
            raise EmbeddingResponseError(
                "Embedding API returned an unexpected number of vectors",
                context={**context, "received": len(items) if isinstance(items, list) else None},
            )

        vectors = []
        for item in items:
            values = item.get("values") if isinstance(item, dict) else None
            if not values:
                raise EmbeddingResponseError("Embedding API returned an empty vector", context=context)
            vectors.append([float(v) for v in values])
        return vectors
