"""Health check endpoints."""

from fastapi import APIRouter, Depends

from .....core.services.knowledge_base import KnowledgeBase
from ..deps import get_knowledge_base
from ..models import HealthResponse, IndexStats

API_VERSION = "1.0.0"

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(knowledge_base: KnowledgeBase = Depends(get_knowledge_base)) -> HealthResponse:
    """Basic health check with knowledge base state.

    Does not trigger indexing.
    """
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        index=IndexStats(**knowledge_base.stats()),
    )
