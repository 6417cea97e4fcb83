"""Test configuration for database unit tests.

This module provides common fixtures for exercising the repositories against
an in-memory SQLite database through the same engine and session helpers the
server uses.
"""

from __future__ import annotations

from typing import Any, AsyncGenerator, Dict
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from vet_clinic.core.database import (
    RepositoryBundle,
    build_repositories,
    create_all,
    create_engine,
    create_sessionmaker,
)


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create in-memory SQLite engine with every table created."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(in_memory_engine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(in_memory_engine)


@pytest.fixture
def repos(session_factory) -> RepositoryBundle:
    """All three repositories sharing the in-memory database."""
    return build_repositories(session_factory=session_factory)


@pytest.fixture
def owner_data() -> Dict[str, Any]:
    return {
        "first_name": "Ana",
        "last_name": "Gomez",
        "national_id": "1002003004",
        "phone": "3001234567",
        "email": "ana.gomez@example.com",
    }


@pytest.fixture
def pet_data() -> Dict[str, Any]:
    return {"owner_id": 1, "name": "Luna", "breed": "Labrador", "age": "3 years"}


@pytest.fixture
def medical_record_data() -> Dict[str, Any]:
    return {
        "pet_id": 1,
        "attention_date": "2024-03-05T14:30:00",
        "reason": "Annual vaccination",
        "diagnosis": "Healthy, rabies booster applied",
    }


@pytest.fixture
def failing_session_factory():
    """Build a session factory whose sessions raise ``exc`` on execute and commit.

    Returns:
        Callable taking the exception to raise and returning ``(factory, session)``
    """

    def _build(exc: BaseException):
        session = MagicMock()
        session.add = MagicMock()
        session.execute = AsyncMock(side_effect=exc)
        session.commit = AsyncMock(side_effect=exc)

        factory = MagicMock()
        factory.return_value.__aenter__ = AsyncMock(return_value=session)
        factory.return_value.__aexit__ = AsyncMock(return_value=False)
        return factory, session

    return _build
