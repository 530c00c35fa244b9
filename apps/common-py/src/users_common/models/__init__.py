"""Domain models."""

from users_common.models.pagination import PageDescriptor
from users_common.models.user import PatchOperation, UserCreateRequest, UserDto, UserEntity

__all__ = [
    "PageDescriptor",
    "PatchOperation",
    "UserCreateRequest",
    "UserDto",
    "UserEntity",
]
