"""Creation validation and partial-update application for users."""

import logging
from collections.abc import Sequence

from users_common.config import UserConfig
from users_common.exceptions import MalformedRequestError, ValidationFailure
from users_common.models.user import PatchOperation, UserCreateRequest, UserEntity

logger = logging.getLogger(__name__)

DEFAULT_FIRST_NAME = "John"
DEFAULT_LAST_NAME = "Doe"

REPLACE_OP = "replace"

# path -> (entity field, error message)
PATCHABLE_FIELDS: dict[str, tuple[str, str]] = {
    "login": ("login", "Invalid login"),
    "firstName": ("first_name", "First name is required"),
    "lastName": ("last_name", "Last name is required"),
}


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class UserValidator:
    """Validate new users and apply whitelisted patch operations."""

    def __init__(self, config: UserConfig) -> None:
        self.login_regex = config.login_regex

    def is_valid_login(self, login: str | None) -> bool:
        return not _is_blank(login) and self.login_regex.fullmatch(login) is not None

    def build_user(self, request: UserCreateRequest) -> UserEntity:
        """Turn a creation request into an unsaved user.

        Blank names fall back to "John"/"Doe"; only the login is enforced.

        Raises:
            ValidationFailure: If the login is missing or does not match the pattern
        """
        if not self.is_valid_login(request.login):
            raise ValidationFailure("login", "Login is required")

        return UserEntity(
            login=request.login,
            first_name=DEFAULT_FIRST_NAME if _is_blank(request.first_name) else request.first_name,
            last_name=DEFAULT_LAST_NAME if _is_blank(request.last_name) else request.last_name,
        )

    def apply_patch(self, user: UserEntity, operations: Sequence[PatchOperation] | None) -> UserEntity:
        """Apply replace operations to a detached copy of ``user``.

        Operations run in order. Anything other than a replace of a whitelisted
        path is skipped. The first invalid value aborts the whole batch, and
        ``user`` itself is never modified.

        Args:
            user: Current state of the user
            operations: Ordered patch operations

        Returns:
            Patched copy of the user, ready to persist

        Raises:
            MalformedRequestError: If there are no operations
            ValidationFailure: On the first invalid replacement value
        """
        if not operations:
            raise MalformedRequestError("Patch operation list is empty")

        staged = user.model_copy()
        for operation in operations:
            if operation.op != REPLACE_OP or operation.path not in PATCHABLE_FIELDS:
                continue

            field, message = PATCHABLE_FIELDS[operation.path]
            if operation.path == "login":
                valid = self.is_valid_login(operation.value)
            else:
                valid = not _is_blank(operation.value)

            if not valid:
                logger.info("Rejected patch of %s for user %s", operation.path, user.id)
                raise ValidationFailure(operation.path, message)

            setattr(staged, field, operation.value)

        return staged
