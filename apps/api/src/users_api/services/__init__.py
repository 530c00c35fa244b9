"""Service initialization and dependency injection."""

import logging

from fastapi import Depends

from users_api.config import Settings, get_settings
from users_api.services.user_handler import COLLECTION_PATH, UserResourceHandler
from users_common.services.negotiation import ContentNegotiator
from users_common.services.pagination import PaginationEngine
from users_common.services.user_repository import InMemoryUserRepository, UserRepository
from users_common.services.validation import UserValidator

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache = {}


def get_user_repository() -> UserRepository:
    """Get the process-wide user repository.

    Returns:
        InMemoryUserRepository instance
    """
    if "user_repository" not in _services_cache:
        _services_cache["user_repository"] = InMemoryUserRepository()
        logger.info("Initialized InMemoryUserRepository")

    return _services_cache["user_repository"]


def get_user_handler(
    settings: Settings = Depends(get_settings),
    repository: UserRepository = Depends(get_user_repository),
) -> UserResourceHandler:
    """Get the user resource handler.

    Args:
        settings: Application settings
        repository: User repository

    Returns:
        UserResourceHandler wired with validation, negotiation and pagination
    """
    if "user_handler" not in _services_cache:
        user_config = settings.user_config()
        _services_cache["user_handler"] = UserResourceHandler(
            repository=repository,
            validator=UserValidator(user_config),
            negotiator=ContentNegotiator(),
            pagination=PaginationEngine(user_config, collection_path=COLLECTION_PATH),
        )
        logger.info(
            "Initialized UserResourceHandler (page size %d..%d)",
            user_config.min_page_size,
            user_config.max_page_size,
        )

    return _services_cache["user_handler"]


def reset_services() -> None:
    """Drop cached service instances, e.g. between tests."""
    _services_cache.clear()
