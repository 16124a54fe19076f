"""Store client - owns the async engine for the lifetime of the application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.app.core.config import Settings
from src.app.core.exceptions import StoreUnavailable
from src.app.core.logging import get_logger

# Register table metadata before create_all runs
from src.app.models import Issue  # noqa: F401

logger = get_logger(__name__)


class IssueStore:
    """Explicitly constructed store client.

    Opened once at startup and closed at shutdown by the application lifespan,
    then handed to request handlers through dependencies.
    """

    def __init__(
        self,
        database_url: str,
        *,
        pool_size: int = 5,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        self.database_url = database_url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.echo = echo
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "IssueStore":
        return cls(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=settings.database_echo,
        )

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise StoreUnavailable("Store is not open")
        return self._engine

    def _engine_kwargs(self) -> dict[str, Any]:
        if self.database_url.startswith("sqlite"):
            kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
            # In-memory databases live inside a single connection
            if self.database_url.endswith("://") or ":memory:" in self.database_url:
                kwargs["poolclass"] = StaticPool
            return kwargs
        return {
            "pool_size": self.pool_size,
            "max_overflow": self.max_overflow,
            "pool_pre_ping": True,
        }

    async def open(self) -> None:
        """Create the engine and make sure the issues table exists."""
        if self._engine is not None:
            return
        engine = create_async_engine(self.database_url, echo=self.echo, **self._engine_kwargs())
        try:
            async with engine.begin() as connection:
                await connection.run_sync(SQLModel.metadata.create_all)
        except (OperationalError, InterfaceError) as e:
            await engine.dispose()
            raise StoreUnavailable(str(e)) from e

        self._engine = engine
        self._session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info("Store opened", dialect=engine.dialect.name)

    async def close(self) -> None:
        """Dispose the engine. Call during shutdown."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Store closed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession]:
        """Yield a session; connectivity failures surface as StoreUnavailable."""
        if self._session_factory is None:
            raise StoreUnavailable("Store is not open")

        async with self._session_factory() as session:
            try:
                yield session
            except (OperationalError, InterfaceError) as e:
                logger.error("Store operation failed", reason=str(e))
                raise StoreUnavailable(str(e)) from e

    async def ping(self) -> None:
        """Round-trip a trivial query to the store."""
        async with self.session() as session:
            await session.execute(text("SELECT 1"))
