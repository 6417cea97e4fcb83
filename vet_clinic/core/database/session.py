"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that back the repositories used by the server.
"""

from __future__ import annotations

from vet_clinic.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def init_db() -> None:
    """
    Initialize the database.

    Creates any missing ``owners``, ``pets`` and ``medical_records`` tables when
    ``VET_CLINIC_CREATE_TABLES`` is enabled. Existing tables are left untouched.
    """
    if settings.create_tables_on_startup:
        await create_all(engine)
