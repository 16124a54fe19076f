"""Store and session dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.app.core.store import IssueStore


def get_store(request: Request) -> IssueStore:
    """Get the store client opened by the application lifespan."""
    return request.app.state.store


Store = Annotated[IssueStore, Depends(get_store)]


async def get_db_session(store: Store) -> AsyncGenerator[AsyncSession]:
    """Get a session bound to the application's store."""
    async with store.session() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
