"""Tests for the health check endpoint."""

import pytest
from fastapi.testclient import TestClient


@pytest.mark.unit
def test_health_check(client: TestClient) -> None:
    """Test the health check endpoint returns 200."""
    response = client.get("/api/health")
    assert response.status_code == 200


@pytest.mark.unit
def test_health_check_response_schema(client: TestClient) -> None:
    """Test the health check endpoint response has correct schema."""
    response = client.get("/api/health")
    data = response.json()

    assert data["status"] == "ok"
    assert isinstance(data["version"], str)
    assert data["message"] == "API is healthy"
    assert data["totalUsers"] == 0


@pytest.mark.unit
def test_health_check_counts_users(client: TestClient, api_url: str) -> None:
    """Test the health check reports the number of stored users."""
    client.post(api_url, json={"login": "alice_01"})
    client.post(api_url, json={"login": "bob"})

    data = client.get("/api/health").json()
    assert data["totalUsers"] == 2


@pytest.mark.unit
def test_health_check_response_json() -> None:
    """Test health check response is valid JSON."""
    from users_api.models.health import HealthCheckResponse

    response = HealthCheckResponse(
        status="ok",
        version="0.1.0",
        environment="test",
    )

    response_dict = response.model_dump(by_alias=True)
    assert response_dict["status"] == "ok"
    assert response_dict["totalUsers"] == 0
