"""Application middlewares."""

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.app.core.config import Settings

from .logging_context import logging_context_middleware

__all__ = [
    "setup_middlewares",
    "logging_context_middleware",
]


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """Configure all application middlewares.

    Middleware order matters - the last one added is the outermost.
    """
    # Logging context - binds request_id to structlog context
    @app.middleware("http")
    async def _logging_context(request, call_next):  # type: ignore[no-untyped-def]
        return await logging_context_middleware(request, call_next)

    # CORS - handle cross-origin requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )

    # Correlation ID - generates/propagates X-Request-ID, must wrap the rest
    app.add_middleware(CorrelationIdMiddleware)
