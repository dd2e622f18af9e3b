"""Tests for main API endpoints."""

import pytest
from fastapi.testclient import TestClient

from src.inventoflow.main import app


def test_health_check(client: TestClient) -> None:
    """Test health check endpoint returns healthy status."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_api_prefix() -> None:
    """Test that API v1 prefix is configured correctly."""
    from src.inventoflow.config import settings

    assert settings.api_v1_prefix == "/api/v1"


def test_routes_registered() -> None:
    paths = set(app.openapi()["paths"])

    assert "/api/v1/session" in paths
    assert "/api/v1/items" in paths
    assert "/api/v1/items/{item_id}" in paths
    assert "/api/v1/dashboard" in paths


def test_services_missing_raises(client: TestClient) -> None:
    """Endpoints fail loudly if startup never installed the services."""
    with pytest.raises(RuntimeError, match="not initialized"):
        client.get("/api/v1/session")
