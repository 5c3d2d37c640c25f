"""FastAPI dependency injection for RagBot.

Services live on the ``Container`` stored in ``app.state`` by the app
factory; these helpers hand them to route handlers.
"""

from fastapi import Request

from ....composition.container import Container
from ....core.ports.notes_port import NotesPort
from ....core.services.chat_service import ChatService
from ....core.services.intent_router import IntentRouter
from ....core.services.knowledge_base import KnowledgeBase


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_chat_service(request: Request) -> ChatService:
    return get_container(request).chat_service


def get_knowledge_base(request: Request) -> KnowledgeBase:
    return get_container(request).knowledge_base


def get_notes(request: Request) -> NotesPort:
    return get_container(request).notes


def get_intent_router(request: Request) -> IntentRouter:
    return get_container(request).intent_router
