"""Text helpers shared by the loaders and the answer composer.

Incoming documents and model output have BOM markers stripped and are
NFKC-normalized once, at the boundary. Internal layers assume clean text.
"""

import unicodedata


def clean_text(text: str, *, normalize: bool = True) -> str:
    """Remove BOM markers and optionally NFKC-normalize text.

    Args:
        text: Input text that may contain BOM or replacement characters.
        normalize: Whether to apply NFKC normalization.

    Returns:
        Cleaned text.
    """
    if not text:
        return ""

    cleaned = text.replace("\ufeff", "").replace("\ufffd", "")
    if normalize:
        cleaned = unicodedata.normalize("NFKC", cleaned)
    return cleaned


def normalize_apostrophes(text: str) -> str:
    """Fold typographic apostrophes to ASCII so phrase matching is stable."""
    return text.replace("\u2019", "'").replace("\u2018", "'")
