"""Domain models for RagBot.

- document: Document, Segment, IndexEntry, ScoredSegment, RetrievalResult
- chat: Answer, IndexState, Intent, IntentRule, IntentDecision

All models are re-exported here:

    from ragbot.core.domain import Document, Segment, RetrievalResult
"""

from .chat import Answer, IndexState, Intent, IntentDecision, IntentRule
from .document import Document, IndexEntry, RetrievalResult, ScoredSegment, Segment

__all__ = [
    # Document models
    "Document",
    "Segment",
    "IndexEntry",
    "ScoredSegment",
    "RetrievalResult",
    # Chat models
    "Answer",
    "IndexState",
    "Intent",
    "IntentRule",
    "IntentDecision",
]
