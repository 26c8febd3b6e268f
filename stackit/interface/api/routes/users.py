"""User profile routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from stackit.application.usecase.auth import (
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from stackit.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from stackit.domain.error import DomainError
from stackit.interface.api.auth import authenticate
from stackit.interface.api.errors import http_error

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """Get the authenticated user, including current reputation."""
    return await authenticate(get_current_user_use_case, authorization, auth_token)


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: UUID,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's public profile.

    Example:
        GET /users/123e4567-e89b-12d3-a456-426614174000

        Response:
        {
            "user_id": "123e4567-e89b-12d3-a456-426614174000",
            "username": "alice",
            "avatar": null,
            "role": "user",
            "reputation": 42,
            "created_at": "2025-01-15T12:34:56Z"
        }
    """
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=str(user_id))
        )
    except DomainError as e:
        raise http_error(e)
