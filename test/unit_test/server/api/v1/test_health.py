"""Tests for the health and version endpoints."""

from unittest.mock import patch

from vet_clinic import __version__


async def test_health_check(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_version(client):
    response = await client.get("/version")

    assert response.status_code == 200
    assert response.json() == {"version": __version__, "api_version": "v1", "database": "sqlite"}


async def test_version_reports_backend_without_credentials(client):
    url = "postgresql+asyncpg://vet:secret@db:5432/vet_clinic"
    with patch("vet_clinic.server.api.v1.health.settings.database_url", url):
        response = await client.get("/version")

    assert response.json()["database"] == "postgresql"
    assert "secret" not in response.text
