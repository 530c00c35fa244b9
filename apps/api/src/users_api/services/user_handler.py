"""Request handling for the user resource.

Each operation runs the same explicit pipeline over plain values:
parse the raw request parts, validate them, negotiate the representation,
then render a HandlerResponse. Domain errors propagate as UsersApiError
subclasses and are turned into responses at the request boundary.
"""

import json
import logging
from typing import Any
from uuid import UUID

from fastapi import status
from pydantic import BaseModel, Field, ValidationError

from users_common.exceptions import MalformedRequestError, NotFoundError
from users_common.models.user import PatchOperation, UserCreateRequest, UserDto, UserEntity
from users_common.services.negotiation import ContentNegotiator, MediaFormat
from users_common.services.pagination import PaginationEngine
from users_common.services.user_repository import UserRepository
from users_common.services.validation import UserValidator

logger = logging.getLogger(__name__)

COLLECTION_PATH = "/api/users"
ALLOWED_METHODS = "POST, GET, OPTIONS"


class HandlerResponse(BaseModel):
    """Status, headers and body to send back to the client."""

    status_code: int = status.HTTP_200_OK
    headers: dict[str, str] = Field(default_factory=dict)
    body: bytes = b""
    media_type: str | None = None


def parse_user_id(raw_id: str) -> UUID:
    """Parse a path identifier; anything that is not a UUID names no user."""
    try:
        return UUID(raw_id)
    except (TypeError, ValueError):
        raise NotFoundError(f"User {raw_id} not found")


def parse_int(raw: str | None) -> int | None:
    """Parse an optional integer query parameter, treating junk as absent."""
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_json_body(body: bytes | None) -> Any:
    """Decode a JSON request body.

    Raises:
        MalformedRequestError: If the body is missing, empty or not JSON
    """
    if not body or not body.strip():
        raise MalformedRequestError("Request body is empty")
    try:
        return json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedRequestError(f"Request body is not valid JSON: {e}") from e


def parse_create_request(body: bytes | None) -> UserCreateRequest:
    payload = parse_json_body(body)
    if not isinstance(payload, dict):
        raise MalformedRequestError("Request body must be a JSON object")
    try:
        return UserCreateRequest.model_validate(payload)
    except ValidationError as e:
        logger.info("Rejected user payload: %s", e)
        raise MalformedRequestError("Invalid user payload") from e


def parse_patch_operations(body: bytes | None) -> list[PatchOperation]:
    payload = parse_json_body(body)
    if not isinstance(payload, list):
        raise MalformedRequestError("Patch body must be a JSON array of operations")
    try:
        return [PatchOperation.model_validate(item) for item in payload]
    except ValidationError as e:
        logger.info("Rejected patch operations: %s", e)
        raise MalformedRequestError("Invalid patch operation") from e


class UserResourceHandler:
    """Orchestrate repository, validation, pagination and negotiation per verb."""

    def __init__(
        self,
        repository: UserRepository,
        validator: UserValidator,
        negotiator: ContentNegotiator,
        pagination: PaginationEngine,
    ) -> None:
        self.repository = repository
        self.validator = validator
        self.negotiator = negotiator
        self.pagination = pagination

    def _get_existing(self, raw_id: str) -> UserEntity:
        user = self.repository.find_by_id(parse_user_id(raw_id))
        if user is None:
            raise NotFoundError(f"User {raw_id} not found")
        return user

    def get_user(self, raw_id: str, accept: str | None) -> HandlerResponse:
        user = self._get_existing(raw_id)
        media_format = self.negotiator.select(accept)
        return HandlerResponse(
            body=self.negotiator.render_model(user.to_dto(), media_format),
            media_type=media_format.content_type,
        )

    def create_user(self, body: bytes | None, accept: str | None) -> HandlerResponse:
        request = parse_create_request(body)
        new_user = self.validator.build_user(request)
        media_format = self.negotiator.select(accept)

        created = self.repository.insert(new_user)
        logger.info("Created user %s (%s)", created.id, created.login)

        return HandlerResponse(
            status_code=status.HTTP_201_CREATED,
            headers={"Location": f"{COLLECTION_PATH}/{created.id}"},
            body=self.negotiator.render_id(created.id, media_format),
            media_type=media_format.content_type,
        )

    def patch_user(self, raw_id: str, body: bytes | None) -> HandlerResponse:
        operations = parse_patch_operations(body)
        if not operations:
            raise MalformedRequestError("Patch operation list is empty")

        user = self._get_existing(raw_id)
        patched = self.validator.apply_patch(user, operations)
        self.repository.update(patched)

        return HandlerResponse(status_code=status.HTTP_204_NO_CONTENT)

    def delete_user(self, raw_id: str) -> HandlerResponse:
        user = self._get_existing(raw_id)
        self.repository.delete(user.id)
        logger.info("Deleted user %s", user.id)
        return HandlerResponse(status_code=status.HTTP_204_NO_CONTENT)

    def head_user(self, raw_id: str) -> HandlerResponse:
        self._get_existing(raw_id)
        return HandlerResponse(headers={"Content-Type": MediaFormat.JSON.content_type})

    def list_users(self, page_number: str | None, page_size: str | None, accept: str | None) -> HandlerResponse:
        media_format = self.negotiator.select(accept)
        users, page = self.pagination.paginate(self.repository, parse_int(page_number), parse_int(page_size))
        dtos: list[UserDto] = [user.to_dto() for user in users]

        return HandlerResponse(
            headers={"X-Pagination": page.to_header()},
            body=self.negotiator.render_models(dtos, UserDto.__name__, media_format),
            media_type=media_format.content_type,
        )

    def options(self) -> HandlerResponse:
        return HandlerResponse(headers={"Allow": ALLOWED_METHODS})
