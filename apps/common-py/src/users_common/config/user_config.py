"""Immutable configuration shared by validation and pagination."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_LOGIN_PATTERN = r"^[A-Za-z0-9_-]+$"


class UserConfig(BaseModel):
    """Process-wide settings for user resource handling.

    Built once at startup and injected into the components that need it.
    """

    model_config = ConfigDict(frozen=True)

    login_pattern: str = Field(DEFAULT_LOGIN_PATTERN, description="Regex every login must match")
    min_page_size: int = Field(1, description="Smallest page size a list request can get")
    max_page_size: int = Field(20, description="Largest page size a list request can get")

    @field_validator("login_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid login pattern: {e}") from e
        return value

    @model_validator(mode="after")
    def _check_page_bounds(self) -> "UserConfig":
        if self.min_page_size < 1:
            raise ValueError("min_page_size must be at least 1")
        if self.max_page_size < self.min_page_size:
            raise ValueError("max_page_size must not be less than min_page_size")
        return self

    @property
    def login_regex(self) -> re.Pattern[str]:
        return re.compile(self.login_pattern)
