"""User Schemas — camelCase wire format, name validation, and entity mappers."""

import pytest
from pydantic import ValidationError

from users_api.core.domain_types import User
from users_api.schemas.user import (
    CreateUserRequest, UserResponse, to_user, to_user_response,
)


def test_create_request_accepts_camel_case():
    assert CreateUserRequest.model_validate({"fullName": "Nick"}).full_name == "Nick"


def test_create_request_strips_whitespace():
    assert CreateUserRequest(full_name="  Nick  ").full_name == "Nick"


@pytest.mark.parametrize("name", ["", "   ", "x" * 201])
def test_create_request_rejects_invalid_names(name):
    with pytest.raises(ValidationError):
        CreateUserRequest(full_name=name)


def test_to_user_generates_fresh_id():
    request = CreateUserRequest(full_name="Nick")
    first, second = to_user(request), to_user(request)
    assert first.full_name == "Nick"
    assert first.id != second.id


def test_to_user_response_serializes_by_alias():
    user = User(full_name="Nick")
    response = to_user_response(user)

    assert isinstance(response, UserResponse)
    assert response.model_dump(mode="json", by_alias=True) == {
        "id": str(user.id), "fullName": "Nick",
    }
