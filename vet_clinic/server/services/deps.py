"""
Repository Dependency.

Provides a singleton ``RepositoryBundle`` for API endpoints. The bundle is
built from the global session factory; tests replace it through
``app.dependency_overrides[get_repositories]``.
"""

from typing import Annotated, Optional

from fastapi import Depends

from vet_clinic.core.database import RepositoryBundle, build_repositories

_repositories: Optional[RepositoryBundle] = None


def get_repositories() -> RepositoryBundle:
    global _repositories
    if _repositories is None:
        from vet_clinic.core.database.session import async_session_maker

        _repositories = build_repositories(session_factory=async_session_maker)
    return _repositories


RepositoriesDep = Annotated[RepositoryBundle, Depends(get_repositories)]
