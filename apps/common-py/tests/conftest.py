"""Pytest configuration for common-py tests."""

import pytest

from users_common.config import UserConfig
from users_common.models.user import UserEntity
from users_common.services.user_repository import InMemoryUserRepository


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as fast unit tests")


@pytest.fixture
def user_config() -> UserConfig:
    """Default user configuration."""
    return UserConfig()


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """Empty in-memory repository."""
    return InMemoryUserRepository()


@pytest.fixture
def make_user():
    """Factory for unsaved users."""

    def _make_user(login: str = "alice", first_name: str = "Alice", last_name: str = "Liddell") -> UserEntity:
        return UserEntity(login=login, first_name=first_name, last_name=last_name)

    return _make_user
