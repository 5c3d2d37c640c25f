"""Notes endpoints backed by the external record store."""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from .....core.domain.exceptions import MissingFieldError
from .....core.ports.notes_port import NotesPort
from ..deps import get_notes
from ..models import ErrorResponse, NoteRequest, NoteResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["notes"])


@router.post(
    "",
    response_model=NoteResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing name or notes"},
        500: {"model": ErrorResponse, "description": "Notes service unavailable"},
    },
)
def create_note(request: NoteRequest, notes: NotesPort = Depends(get_notes)) -> NoteResponse:
    """Store a note with ``Name`` and ``Notes`` fields.

    Upstream failures keep the upstream status code.
    """
    if not (request.name and request.name.strip()) or not (request.notes and request.notes.strip()):
        raise MissingFieldError("Both name and notes are required")

    data = notes.create_note(request.name.strip(), request.notes.strip())
    return NoteResponse(success=True, data=data)


@router.get("/test")
def test_connection(notes: NotesPort = Depends(get_notes)) -> dict[str, Any]:
    """Diagnostic: verify connectivity to the notes service.

    Returns identifiers and a truncated token prefix, never the token.
    """
    return notes.check_connection()
