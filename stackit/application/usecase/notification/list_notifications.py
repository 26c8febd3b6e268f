"""List notifications use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.projection import NotificationView, ViewBuilder
from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import NotificationService
from stackit.domain.value import UserId


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # Authenticated recipient


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationView]


class ListNotificationsUseCase(BaseUseCase):
    """Use case for reading one's most recent notifications."""

    def __init__(
        self, notification_service: NotificationService, view_builder: ViewBuilder
    ) -> None:
        self.notification_service = notification_service
        self.view_builder = view_builder

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        notifications = await self.notification_service.list_for_user(
            UserId(UUID(request.user_id))
        )
        return ListNotificationsResponse(
            notifications=await self.view_builder.notifications(notifications)
        )
