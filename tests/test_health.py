"""Tests for health check endpoint."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from src.movie_facts_service.config import settings


def test_health_check(client: TestClient) -> None:
    """Test that health endpoint reports the service identity."""
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == settings.service_name
    assert data["version"] == "0.1.0"
    assert "environment" in data


def test_health_check_reports_lookup_credentials(client: TestClient) -> None:
    """Test that health endpoint flags a missing OMDb key."""
    with patch.object(settings, "omdb_api_key", ""):
        assert client.get("/health").json()["movie_lookup_configured"] is False

    with patch.object(settings, "omdb_api_key", "secret"):
        assert client.get("/health").json()["movie_lookup_configured"] is True
