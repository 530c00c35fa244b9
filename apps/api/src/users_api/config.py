"""Configuration management for the Users API."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from users_common.config import DEFAULT_LOGIN_PATTERN, UserConfig


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the API project directory (apps/api/.env).

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # This file is in apps/api/src/users_api/config.py
    # So we go up 3 levels to get to apps/api/
    current_file = Path(__file__)
    api_dir = current_file.parent.parent.parent
    default_env_file = api_dir / ".env"
    return str(default_env_file)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "users-api"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "info"

    # API
    api_host: str = "localhost"
    api_port: int = 5000

    # UI
    ui_url: str = "http://localhost:5173"

    # Users
    login_pattern: str = DEFAULT_LOGIN_PATTERN
    min_page_size: int = 1
    max_page_size: int = 20

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def user_config(self) -> UserConfig:
        """Build the immutable configuration for user handling."""
        return UserConfig(
            login_pattern=self.login_pattern,
            min_page_size=self.min_page_size,
            max_page_size=self.max_page_size,
        )


@lru_cache
def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
