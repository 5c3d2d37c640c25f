"""Chat, indexing and intent models."""

from dataclasses import dataclass, field
from enum import Enum

from .document import ScoredSegment


class IndexState(Enum):
    """Lifecycle of the process-wide knowledge base.

    Attributes:
        UNINITIALIZED: Nothing has been ingested yet.
        INDEXING: An ingestion run is in progress.
        READY: The index can serve queries.
        FAILED: No documents were found; chat stays unavailable until restart.
    """

    UNINITIALIZED = "uninitialized"
    INDEXING = "indexing"
    READY = "ready"
    FAILED = "failed"


@dataclass
class Answer:
    """Answer produced for a question.

    Attributes:
        text: Final answer text returned to the user.
        sources: Segments the answer was composed from.
        grounded: False when the fixed fallback message was substituted.
    """

    text: str
    sources: list[ScoredSegment] = field(default_factory=list)
    grounded: bool = True


class Intent(Enum):
    """What a free-text chat message is asking for."""

    TAKE_NOTE = "take_note"
    SCHEDULE = "schedule"
    QUESTION = "question"


@dataclass(frozen=True)
class IntentRule:
    """Maps a case-insensitive regular expression to an intent."""

    pattern: str
    intent: Intent


@dataclass(frozen=True)
class IntentDecision:
    """Result of routing a message: the intent and, for scheduling, a link."""

    intent: Intent
    link: str | None = None
