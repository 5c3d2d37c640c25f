"""RagBot: retrieval-augmented chatbot over a local document corpus."""

__version__ = "1.0.0"
