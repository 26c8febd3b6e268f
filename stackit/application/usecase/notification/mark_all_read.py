"""Mark all notifications read use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import NotificationService
from stackit.domain.value import UserId


class MarkAllReadRequest(BaseModel):
    """Mark all read request."""

    user_id: str  # Authenticated recipient


class MarkAllReadResponse(BaseModel):
    """Mark all read response."""

    message: str = "All notifications marked as read"
    updated: int


class MarkAllReadUseCase(BaseUseCase):
    """Use case for clearing every unread notification of a user."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkAllReadRequest) -> MarkAllReadResponse:
        updated = await self.notification_service.mark_all_as_read(
            UserId(UUID(request.user_id))
        )
        return MarkAllReadResponse(updated=updated)
