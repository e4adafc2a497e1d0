"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from sbs.config import get_settings
from sbs.database import close_db, create_tables, get_session, init_db
from sbs.main import create_app
from tests.helpers import login, register


@pytest.fixture(autouse=True)
def _test_settings(tmp_path, monkeypatch):
    """Point every test at its own SQLite file and a fixed signing key."""
    monkeypatch.setenv("SBS_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'sbs_test.db'}")
    monkeypatch.setenv("SBS_JWT_SECRET", "test-signing-secret")
    monkeypatch.setenv("SBS_LOG_FORMAT", "console")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[None, None]:
    """Initialise the engine and schema for one test."""
    await init_db(get_settings().database_url)
    await create_tables()
    yield
    await close_db()


@pytest_asyncio.fixture
async def client(database) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP test client bound to the test database."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def db_session(database) -> AsyncGenerator[AsyncSession, None]:
    """Get a direct database session for seeding and assertions."""
    sessions = get_session()
    session = await anext(sessions)
    yield session
    await sessions.aclose()


@pytest_asyncio.fixture
async def authed_client(client: AsyncClient) -> AsyncClient:
    """Client with user 'alice' registered and her bearer token attached."""
    await register(client)
    response = await login(client)
    client.headers["Authorization"] = f"Bearer {response.json()['token']}"
    return client
