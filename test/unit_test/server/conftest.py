"""Test configuration for the HTTP layer.

The application is exercised through ``httpx.AsyncClient`` over
``ASGITransport``; the repository dependency is overridden with repositories
bound to a fresh in-memory SQLite database per test.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from vet_clinic.core.database import (
    RepositoryBundle,
    build_repositories,
    create_all,
    create_engine,
    create_sessionmaker,
)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def repositories() -> AsyncGenerator[RepositoryBundle, None]:
    """Repositories over a fresh in-memory database."""
    engine = create_engine(TEST_DATABASE_URL)
    await create_all(engine)
    yield build_repositories(session_factory=create_sessionmaker(engine))
    await engine.dispose()


@pytest_asyncio.fixture
async def app():
    from vet_clinic.server.main import app as fastapi_app

    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture(name="client")
async def client_fixture(app, repositories) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with the repository dependency overridden."""
    from vet_clinic.server.services.deps import get_repositories

    app.dependency_overrides[get_repositories] = lambda: repositories

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def owner(client) -> dict:
    """An owner created through the API."""
    response = await client.post(
        "/api/v1/owners",
        json={
            "first_name": "Ana",
            "last_name": "Gomez",
            "national_id": "1002003004",
            "phone": "3001234567",
            "email": "ana.gomez@example.com",
        },
    )
    assert response.status_code == 201
    return response.json()["data"]
