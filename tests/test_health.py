"""Tests for the health check endpoint."""

from fastapi.testclient import TestClient

from assetdrop.main import app

client = TestClient(app)


def test_health_endpoint():
    """Test that the health endpoint returns correct response."""
    response = client.get("/health")

    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == "assetdrop"
    assert data["version"] == "0.1.0"
    assert data["signed_url_host"] == "amanda.inditex.com"
