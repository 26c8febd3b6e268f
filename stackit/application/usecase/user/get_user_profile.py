"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import UserService
from stackit.domain.value import UserId, UserRole

from stackit.application.usecase.base import BaseUseCase


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str


class GetUserProfileResponse(BaseModel):
    """Public user profile."""

    user_id: str
    username: str
    avatar: str | None
    role: UserRole
    reputation: int
    created_at: datetime


class GetUserProfileUseCase(BaseUseCase):
    """Use case for viewing a user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Load the profile.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return GetUserProfileResponse(
            user_id=str(user.id),
            username=user.username.root,
            avatar=user.avatar,
            role=user.role,
            reputation=user.reputation,
            created_at=user.created_at,
        )
