"""Intent routing endpoint (note / schedule / question)."""

from fastapi import APIRouter, Depends

from .....core.services.intent_router import IntentRouter
from ..deps import get_intent_router
from ..models import IntentRequest, IntentResponse

router = APIRouter(tags=["intent"])


@router.post("/intent", response_model=IntentResponse)
def route_intent(
    request: IntentRequest,
    intent_router: IntentRouter = Depends(get_intent_router),
) -> IntentResponse:
    """Classify a chat message and return the scheduling link when relevant."""
    decision = intent_router.route(request.text)
    return IntentResponse(intent=decision.intent.value, link=decision.link)
