"""Health check endpoint with store validation."""

import time
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.app.core.exceptions import StoreUnavailable
from src.app.core.store import IssueStore


def setup_health_endpoint(app: FastAPI) -> None:
    """Configure the health check endpoint."""

    @app.get("/health", include_in_schema=False)
    async def health(request: Request) -> JSONResponse:
        """Health check that round-trips the store."""
        health_status: dict[str, Any] = {
            "status": "healthy",
            "database": "unknown",
            "timestamp": time.time(),
        }

        store: IssueStore = request.app.state.store
        try:
            await store.ping()
            health_status["database"] = "healthy"
        except (StoreUnavailable, SQLAlchemyError) as e:
            health_status["database"] = f"unhealthy: {e!s}"
            health_status["status"] = "unhealthy"

        status_code = 200 if health_status["status"] == "healthy" else 503
        return JSONResponse(content=health_status, status_code=status_code)
