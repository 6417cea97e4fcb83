"""
Centralized database layer for Vet Clinic Records.

This package provides a unified location for the database entities and
repositories of the three clinic stores.

Structure:
- entities/: SQLModel table classes (owners, pets, medical_records)
- repositories/: Data access layer, one repository per entity
- pagination.py: Page bound resolution shared by every repository
- dates.py: Attention date normalization for medical records
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session, repo bundle)
"""

from .base import Base
from .utils import (
    RepositoryBundle,
    build_repositories,
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "RepositoryBundle",
    "build_repositories",
    "create_all",
    "create_engine",
    "create_sessionmaker",
]
