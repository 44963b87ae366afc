"""Tests for health check endpoints."""

from fastapi.testclient import TestClient

from recipebook.main import app


def test_health_check() -> None:
    """Test basic health check endpoint."""
    client = TestClient(app)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "recipebook-api"}


def test_root_endpoint() -> None:
    """Test root endpoint returns API info."""
    client = TestClient(app)
    response = client.get("/")
    assert response.status_code == 200

    data = response.json()
    assert data["name"] == "Recipebook API"
    assert "version" in data
    assert data["docs"] == "/docs"


def test_request_id_generated_when_missing() -> None:
    """Test every response carries a request id header."""
    client = TestClient(app)
    response = client.get("/health")
    assert len(response.headers["X-Request-ID"]) == 32


def test_api_routes_registered() -> None:
    """Test the versioned routes are published in the OpenAPI schema."""
    client = TestClient(app)
    paths = client.get("/openapi.json").json()["paths"]

    assert {
        "/api/v1/ingredients/parse",
        "/api/v1/ingredients/grams",
        "/api/v1/shopping-list/consolidate",
        "/api/v1/shopping-list/generate",
        "/api/v1/nutrition/estimate",
    } <= set(paths)
