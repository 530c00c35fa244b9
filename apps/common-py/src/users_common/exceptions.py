"""Error taxonomy for user resource handling."""

from fastapi import status


class UsersApiError(Exception):
    """Base class for errors surfaced at the request boundary."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(UsersApiError):
    """Referenced user does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class MalformedRequestError(UsersApiError):
    """Request body is missing, empty or cannot be parsed."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotAcceptableError(UsersApiError):
    """Accept header is satisfiable by neither JSON nor XML."""

    status_code = status.HTTP_406_NOT_ACCEPTABLE


class ValidationFailure(UsersApiError):
    """Field-level semantic violation.

    Carries a single-field error payload, e.g. ``{"login": "Invalid login"}``.
    """

    status_code = status.HTTP_422_UNPROCESSABLE_CONTENT

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.error = message

    @property
    def errors(self) -> dict[str, str]:
        return {self.field: self.error}
