"""Domain errors and the exception handlers that render them."""

from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.app.core.logging import get_logger

logger = get_logger(__name__)


class IssueError(Exception):
    """Base for request-level failures reported to the client in the body.

    These never turn into non-200 responses: the API signals failure purely
    through the shape of the JSON payload.
    """

    message: str = "issue error"

    def __init__(self, issue_id: str | None = None):
        super().__init__(self.message)
        self.issue_id = issue_id

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.issue_id is not None:
            body["_id"] = self.issue_id
        return body


class MissingRequiredField(IssueError):
    message = "required field(s) missing"


class MissingIdentifier(IssueError):
    message = "missing _id"


class EmptyUpdateSet(IssueError):
    message = "no update field(s) sent"


class RecordNotFound(IssueError):
    """Unknown or malformed identifier - callers cannot tell the two apart."""

    def __init__(self, issue_id: str | None, action: str):
        self.message = f"could not {action}"
        super().__init__(issue_id)


class StoreUnavailable(Exception):
    """The store could not be reached or failed mid-operation."""


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(IssueError)
    async def issue_error_handler(request: Request, exc: IssueError) -> JSONResponse:
        logger.info(
            "Issue request rejected",
            error=type(exc).__name__,
            issue_id=exc.issue_id,
            method=request.method,
        )
        return JSONResponse(status_code=status.HTTP_200_OK, content=exc.to_body())

    @app.exception_handler(StoreUnavailable)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
        request_id = correlation_id.get()
        logger.error(
            "Store unavailable",
            request_id=request_id,
            path=request.url.path,
            reason=str(exc),
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "detail": "Store unavailable",
                "request_id": request_id,
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )
