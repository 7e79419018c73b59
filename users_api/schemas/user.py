"""User Schemas — Pydantic request/response models and entity mappers for the API boundary.

Invariants:
    - Wire field names are camelCase (fullName); Python attributes stay snake_case
    - CreateUserRequest.full_name: 1-200 chars, stripped, non-blank
    - Mappers are the only place a DTO becomes a User or vice versa

Design Decisions:
    - alias_generator=to_camel with populate_by_name: models accept both spellings,
      responses serialize by alias through FastAPI's response_model
    - to_user creates a fresh id: the entity owns id generation, not the service
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from users_api.core.domain_types import User


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateUserRequest(_CamelModel):
    """User creation — validates name length and whitespace."""
    full_name: str = Field(min_length=1, max_length=200)

    @field_validator("full_name")
    @classmethod
    def strip_full_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("fullName cannot be empty or whitespace")
        return v


class UserResponse(_CamelModel):
    """User response — public-facing user data."""
    id: UUID
    full_name: str


def to_user(request: CreateUserRequest) -> User:
    return User(full_name=request.full_name)


def to_user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, full_name=user.full_name)
