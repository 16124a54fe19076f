"""Store failures surface as 503, distinct from body-level issue errors."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from src.app.core.config import get_settings
from src.app.core.exceptions import StoreUnavailable
from src.app.core.store import IssueStore
from src.app.main import create_app
from src.app.repositories import IssueRepository

pytestmark = [pytest.mark.asyncio, pytest.mark.integration]


async def test_open_fails_for_unreachable_database(tmp_path) -> None:
    store = IssueStore(f"sqlite+aiosqlite:///{tmp_path}/missing/dir/issues.db")

    with pytest.raises(StoreUnavailable):
        await store.open()

    assert store.is_open is False


async def test_request_against_closed_store_returns_503() -> None:
    app = create_app(get_settings(), store=IssueStore("sqlite+aiosqlite://"))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/api/issues/apitest")

    assert response.status_code == 503
    data = response.json()
    assert data["detail"] == "Store unavailable"
    assert "request_id" in data


async def test_store_lifecycle() -> None:
    store = IssueStore("sqlite+aiosqlite://")

    await store.open()
    assert store.is_open
    await store.ping()

    await store.close()
    assert store.is_open is False
    with pytest.raises(StoreUnavailable):
        await store.ping()


async def test_connection_lost_mid_request_returns_503(
    client: AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A driver error inside a repository call is wrapped by the session and rendered as 503."""
    original_find = IssueRepository.find
    calls = {"count": 0}

    async def flaky_find(self, project, filters):
        calls["count"] += 1
        if calls["count"] == 1:
            raise OperationalError("SELECT", {}, Exception("connection lost"))
        return await original_find(self, project, filters)

    monkeypatch.setattr(IssueRepository, "find", flaky_find)

    response = await client.get("/api/issues/apitest")

    assert response.status_code == 503
    data = response.json()
    assert data["detail"] == "Store unavailable"
    assert data["request_id"]

    # The store keeps serving once the connection recovers
    response = await client.get("/api/issues/apitest")
    assert response.status_code == 200
    assert response.json() == []
