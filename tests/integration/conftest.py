"""Integration test fixtures for the store and HTTP client.

Each test gets its own in-memory SQLite store, opened before the app is
built and closed afterwards.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.app.core.config import get_settings
from src.app.core.store import IssueStore
from src.app.main import create_app


@pytest.fixture
async def store() -> AsyncGenerator[IssueStore]:
    """Open an isolated in-memory store."""
    test_store = IssueStore("sqlite+aiosqlite://")
    await test_store.open()
    yield test_store
    await test_store.close()


@pytest.fixture
def app(store: IssueStore) -> FastAPI:
    return create_app(get_settings(), store=store)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as http_client:
        yield http_client


@pytest.fixture
def create_issue(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    """Create an issue through the API and return the response body."""

    async def _create(project: str = "apitest", **fields: Any) -> dict[str, Any]:
        payload = {
            "issue_title": "Title",
            "issue_text": "Text",
            "created_by": "Tester",
            **fields,
        }
        response = await client.post(f"/api/issues/{project}", json=payload)
        assert response.status_code == 200
        body = response.json()
        assert "_id" in body, body
        return body

    return _create
