"""Configuration package."""

from users_common.config.user_config import DEFAULT_LOGIN_PATTERN, UserConfig

__all__ = ["DEFAULT_LOGIN_PATTERN", "UserConfig"]
