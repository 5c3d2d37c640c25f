"""Pydantic models for API requests and responses."""

from typing import Any

from pydantic import BaseModel, Field


class QuestionRequest(BaseModel):
    """Request model for asking a question.

    ``question`` is optional at the schema level so a missing value is
    reported as a 400 by the chat service rather than a 422.
    """

    question: str | None = Field(
        None,
        description="The question to answer from the document corpus",
        json_schema_extra={"example": "How can I optimize sleep?"},
    )


class SourceInfo(BaseModel):
    """Information about a retrieved segment."""

    source: str = Field(..., description="File the segment came from")
    page: int | None = Field(None, description="PDF page number, if any")
    offset: int = Field(..., description="Character offset of the segment in its document")
    score: float = Field(..., description="Cosine similarity to the question")


class AnswerResponse(BaseModel):
    """Response model for an answered question."""

    answer: str = Field(..., description="The generated answer")
    sources: list[SourceInfo] = Field(
        default_factory=list,
        description="Segments used to generate the answer",
    )


class NoteRequest(BaseModel):
    """Request model for storing a note."""

    name: str | None = Field(None, description="Who the note is about")
    notes: str | None = Field(None, description="Note text")


class NoteResponse(BaseModel):
    """Response model for a stored note."""

    success: bool = Field(True, description="Whether the note was stored")
    data: dict[str, Any] = Field(default_factory=dict, description="Notes service response")


class IntentRequest(BaseModel):
    """Request model for intent routing."""

    text: str = Field("", description="Free-text chat message")


class IntentResponse(BaseModel):
    """Response model for intent routing."""

    intent: str = Field(..., description="take_note, schedule or question")
    link: str | None = Field(None, description="Scheduling link for schedule requests")


class IndexStats(BaseModel):
    """Knowledge base status."""

    state: str = Field(..., description="uninitialized, indexing, ready or failed")
    documents: int = Field(0, description="Documents loaded by the last ingestion")
    segments: int = Field(0, description="Segments in the index")
    dimension: int | None = Field(None, description="Embedding dimension")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    index: IndexStats = Field(..., description="Knowledge base status")


class ErrorResponse(BaseModel):
    """Response model for errors.

    Example:
        {"error": "Question is required", "code": "RAG_VAL_003"}
    """

    error: str = Field(..., description="Human-readable error message")
    code: str | None = Field(None, description="Error code (e.g., RAG_VAL_003)")
    details: dict | None = Field(None, description="Structured exception (debug mode only)")
