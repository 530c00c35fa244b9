"""User models for the Users API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserEntity(BaseModel):
    """User entity as owned by the repository."""

    id: UUID | None = Field(None, description="Identifier assigned by the repository on insert")
    login: str = Field(..., description="Login, letters, digits, '_' and '-' only")
    first_name: str = Field(..., description="First name of the user")
    last_name: str = Field(..., description="Last name of the user")
    games_played: int = Field(0, ge=0, description="Number of games the user has played")
    current_game_id: UUID | None = Field(None, description="Game the user is currently in, if any")

    def to_dto(self) -> "UserDto":
        return UserDto(
            id=self.id,
            login=self.login,
            first_name=self.first_name,
            last_name=self.last_name,
            full_name=f"{self.last_name} {self.first_name}",
            games_played=self.games_played,
            current_game_id=self.current_game_id,
        )


class UserDto(BaseModel):
    """Outward representation of a user."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    login: str
    first_name: str
    last_name: str
    full_name: str
    games_played: int
    current_game_id: UUID | None = None


class UserCreateRequest(BaseModel):
    """Body of a user creation request. Every field may be omitted."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "login": "alice_01",
                "firstName": "Alice",
                "lastName": "Liddell",
            }
        },
    )

    login: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class PatchOperation(BaseModel):
    """A single replace instruction of a partial update."""

    op: str = Field("", description="Only 'replace' has an effect")
    path: str = Field("", description="One of 'login', 'firstName', 'lastName'")
    value: str | None = Field(None, description="Replacement value")
