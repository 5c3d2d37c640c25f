"""Embedding service adapters."""

from .gemini_embeddings import GeminiEmbeddingAdapter

__all__ = ["GeminiEmbeddingAdapter"]
