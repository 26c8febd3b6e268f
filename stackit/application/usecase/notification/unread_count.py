"""Unread notification count use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import NotificationService
from stackit.domain.value import UserId


class UnreadCountRequest(BaseModel):
    """Unread count request."""

    user_id: str


class UnreadCountResponse(BaseModel):
    """Unread count response."""

    count: int


class UnreadCountUseCase(BaseUseCase):
    """Use case for the unread badge counter."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: UnreadCountRequest) -> UnreadCountResponse:
        count = await self.notification_service.unread_count(
            UserId(UUID(request.user_id))
        )
        return UnreadCountResponse(count=count)
