from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.app.api.middlewares import setup_middlewares
from src.app.api.routes.router import api_router
from src.app.core.config import Settings, get_settings
from src.app.core.exceptions import setup_exception_handlers
from src.app.core.health import setup_health_endpoint
from src.app.core.logging import get_logger, setup_logging
from src.app.core.store import IssueStore

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - open the store at startup, close it at shutdown."""
    settings: Settings = app.state.settings
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}")

    store: IssueStore = app.state.store
    await store.open()

    yield

    logger.info("Closing connections...")
    await store.close()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "issues", "description": "Project-scoped issue tracking"},
]


def create_app(settings: Settings | None = None, store: IssueStore | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Issue tracking API backed by a persistent store",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store or IssueStore.from_settings(settings)

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(api_router)
    setup_health_endpoint(app)

    return app


app = create_app()
