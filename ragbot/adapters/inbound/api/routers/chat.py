"""Chat endpoint for asking questions about the document corpus."""

import logging

from fastapi import APIRouter, Depends

from .....core.services.chat_service import ChatService
from ..deps import get_chat_service
from ..models import AnswerResponse, ErrorResponse, QuestionRequest, SourceInfo

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post(
    "/chat",
    response_model=AnswerResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid question"},
        404: {"model": ErrorResponse, "description": "No answer found"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
def chat(
    request: QuestionRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> AnswerResponse:
    """Answer a question from the indexed documents.

    Errors raised by the service are rendered by the app-level exception
    handlers (400 validation, 404 no answer, 500 no documents/internal).
    """
    answer = chat_service.ask(request.question)

    return AnswerResponse(
        answer=answer.text,
        sources=[
            SourceInfo(
                source=match.segment.source_id,
                page=match.segment.page_number,
                offset=match.segment.offset,
                score=match.score,
            )
            for match in answer.sources
        ],
    )
