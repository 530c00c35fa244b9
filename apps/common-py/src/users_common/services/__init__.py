"""Common services package."""

from users_common.services.negotiation import ContentNegotiator, MediaFormat
from users_common.services.pagination import PaginationEngine
from users_common.services.user_repository import InMemoryUserRepository, UserRepository
from users_common.services.validation import UserValidator

__all__ = [
    "ContentNegotiator",
    "InMemoryUserRepository",
    "MediaFormat",
    "PaginationEngine",
    "UserRepository",
    "UserValidator",
]
