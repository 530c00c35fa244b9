"""Pytest configuration and fixtures."""

import os
import sys

# Ensure 'apps/api/src' and 'apps/common-py/src' are importable without an install
_TESTS_DIR = os.path.dirname(__file__)
for _relative in (("..", "src"), ("..", "..", "common-py", "src")):
    _src_path = os.path.abspath(os.path.join(_TESTS_DIR, *_relative))
    if _src_path not in sys.path:
        sys.path.insert(0, _src_path)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from users_api.main import app  # noqa: E402
from users_api.services import get_user_repository, reset_services  # noqa: E402
from users_common.services.user_repository import UserRepository  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as fast unit tests")


@pytest.fixture(autouse=True)
def fresh_services():
    """Give every test an empty repository."""
    reset_services()
    yield
    reset_services()


@pytest.fixture
def client() -> TestClient:
    """Create a FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def repository() -> UserRepository:
    """Repository instance shared with the app for the current test."""
    return get_user_repository()


@pytest.fixture
def api_url() -> str:
    """Get the users collection path."""
    return "/api/users"
