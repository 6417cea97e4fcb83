"""
Database utility functions for engine and session management.

This module provides the core utility functions for creating database engines,
session factories, and repository bundles.

Functions:
- create_engine: Creates async SQLAlchemy engine with URL normalization
- create_sessionmaker: Creates async session factory with safe defaults
- create_all: Creates all tables from ORM metadata (for tests/dev)
- build_repositories: Builds the repository bundle for dependency injection
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .base import Base
from .repositories.medical_records import MedicalRecordRepository
from .repositories.owners import OwnerRepository
from .repositories.pets import PetRepository


def create_engine(db_url: str) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    The helper normalizes Postgres URLs to ensure the async driver is used.
    For example, it rewrites ``postgresql://`` and other variants to
    ``postgresql+asyncpg://``. Other URLs (e.g. ``sqlite+aiosqlite://``)
    are passed through unchanged.

    Args:
        db_url: Database connection URL

    Returns:
        Configured AsyncEngine instance
    """
    url = re.sub(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://", "postgresql+asyncpg://", db_url, count=1)
    return create_async_engine(url, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    This is intended for tests and local development; the project ships no
    migration tooling.

    Args:
        engine: Async SQLAlchemy engine
    """
    # Register the table classes with the metadata
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@dataclass(frozen=True)
class RepositoryBundle:
    """Convenience bundle of all repositories for dependency injection."""

    owners: OwnerRepository
    pets: PetRepository
    medical_records: MedicalRecordRepository


def build_repositories(*, session_factory: async_sessionmaker[AsyncSession]) -> RepositoryBundle:
    """Build a ``RepositoryBundle`` from a session factory.

    Every repository shares the same factory (and therefore the same pool);
    each operation opens and releases its own session.

    Args:
        session_factory: Async session factory for creating sessions

    Returns:
        Bundle containing all repository instances
    """
    return RepositoryBundle(
        owners=OwnerRepository(session_factory),
        pets=PetRepository(session_factory),
        medical_records=MedicalRecordRepository(session_factory),
    )
