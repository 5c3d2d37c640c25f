"""FastAPI application for the RagBot API."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ....common.exception_handler import (
    build_error_response,
    get_http_status_code,
    log_exception,
)
from ....composition.container import Container, build_container
from ....config.logging import configure_logging
from ....config.settings import get_settings
from ....core.domain.exceptions import RagBotError
from .routers import chat, health, intent, notes
from .routers.health import API_VERSION

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> FastAPI:
    """Build the FastAPI app around an explicitly constructed container.

    Args:
        container: Services to serve. Built from environment settings
            when omitted.

    Returns:
        Configured FastAPI application.
    """
    if container is None:
        settings = get_settings()
        configure_logging(settings)
        container = build_container(settings)

    debug_mode = container.settings.debug

    app = FastAPI(
        title="RagBot API",
        description="Retrieval-augmented chatbot over a local document corpus.",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=container.settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(chat.router)
    app.include_router(notes.router)
    app.include_router(intent.router)

    # =========================================================================
    # Global Exception Handlers
    # =========================================================================

    @app.exception_handler(RagBotError)
    async def ragbot_error_handler(request: Request, exc: RagBotError) -> JSONResponse:
        """Render RagBotError subclasses with their mapped status code."""
        status_code = get_http_status_code(exc)
        log_exception(
            exc,
            level=logging.WARNING if status_code < 500 else logging.ERROR,
            extra_context={"path": str(request.url.path), "method": request.method},
        )
        return JSONResponse(
            status_code=status_code,
            content=build_error_response(exc, include_details=debug_mode),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed JSON bodies are client errors (400), not 422."""
        logger.warning("Invalid request body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request body", "code": "RAG_VAL_001"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Log unexpected errors in full and return a generic 500."""
        log_exception(exc, extra_context={"path": str(request.url.path), "method": request.method})
        return JSONResponse(
            status_code=500,
            content=build_error_response(exc, include_details=debug_mode),
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("RagBot API starting up...")
        logger.info("Documents directory: %s", container.settings.documents_dir)
        logger.info("Debug mode: %s", "ENABLED" if debug_mode else "DISABLED")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        logger.info("RagBot API shutting down...")

    return app


__all__ = ["create_app"]
