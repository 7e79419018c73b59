"""User Routes — HTTP controller for create/read/delete over the UserService.

Invariants:
    - Routes never contain business logic; they map DTOs and translate outcomes
    - None from get_by_id → 404; False from delete_by_id → 404; False from create → 400
    - Exceptions raised by the service propagate to the global error handlers untouched

Design Decisions:
    - Absence translated here, not in the service: "not found" is an HTTP concern
    - POST returns 201 with a Location header pointing at GET /users/{id}
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from users_api.api.dependencies import get_user_service
from users_api.core.domain_types import UserId
from users_api.core.errors import ResourceNotFoundError, UserNotCreatedError
from users_api.schemas.user import (
    CreateUserRequest, UserResponse, to_user, to_user_response,
)
from users_api.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def get_all(service: UserService = Depends(get_user_service)):
    """List all users."""
    users = await service.get_all()
    return [to_user_response(u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_by_id(
    user_id: UUID, service: UserService = Depends(get_user_service),
):
    """Get a single user."""
    user = await service.get_by_id(UserId(user_id))
    if user is None:
        raise ResourceNotFoundError("User", str(user_id))
    return to_user_response(user)


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create(
    body: CreateUserRequest,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    """Create a new user."""
    user = to_user(body)
    if not await service.create(user):
        raise UserNotCreatedError(str(user.id))
    response.headers["Location"] = f"{router.prefix}/{user.id}"
    return to_user_response(user)


@router.delete("/{user_id}", status_code=status.HTTP_200_OK)
async def delete_by_id(
    user_id: UUID, service: UserService = Depends(get_user_service),
):
    """Delete a user."""
    if not await service.delete_by_id(UserId(user_id)):
        raise ResourceNotFoundError("User", str(user_id))
    return Response(status_code=status.HTTP_200_OK)
