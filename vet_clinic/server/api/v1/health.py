"""
Liveness and build information endpoints.

``/health`` answers without touching the database; ``/version`` reports the
package version and which database backend the server is configured for.
"""

from fastapi import APIRouter
from sqlalchemy.engine import make_url

from vet_clinic import __version__
from vet_clinic.server.core.config import settings

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Report that the API process is up. The database is not queried.",
    response_description="Status object.",
)
async def health_check():
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Package version, API version and configured database backend.",
    response_description="Version object.",
)
async def version():
    """
    Describe the running build.

    ``database`` is the SQLAlchemy backend name of ``DATABASE_URL`` (e.g.
    ``postgresql`` or ``sqlite``); credentials are never included.
    """
    return {
        "version": __version__,
        "api_version": "v1",
        "database": make_url(settings.database_url).get_backend_name(),
    }
