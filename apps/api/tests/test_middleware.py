"""Tests for CORS configuration."""

import pytest
from fastapi.testclient import TestClient

from users_api.middleware import get_allowed_origins, get_cors_headers


@pytest.mark.unit
def test_allowed_origins_in_development() -> None:
    origins = get_allowed_origins("http://localhost:5173/", "development")

    assert origins == ["http://localhost:5173", "http://localhost:3000"]


@pytest.mark.unit
def test_allowed_origins_in_production() -> None:
    assert get_allowed_origins("https://users.example.com", "production") == ["https://users.example.com"]


@pytest.mark.unit
def test_cors_headers_for_unknown_origin() -> None:
    assert get_cors_headers("https://evil.example.com", "https://users.example.com", "production") == {}
    assert get_cors_headers(None) == {}


@pytest.mark.unit
def test_cors_headers_expose_user_headers() -> None:
    headers = get_cors_headers("http://localhost:3000")

    assert headers["Access-Control-Allow-Origin"] == "http://localhost:3000"
    assert headers["Access-Control-Expose-Headers"] == "Location, X-Pagination, Allow"


@pytest.mark.unit
def test_list_response_exposes_pagination_header(client: TestClient, api_url: str) -> None:
    response = client.get(api_url, headers={"Origin": "http://localhost:5173"})

    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert "X-Pagination" in response.headers["access-control-expose-headers"]
