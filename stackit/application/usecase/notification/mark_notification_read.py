"""Mark notification read use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.projection import NotificationView, ViewBuilder
from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import NotificationService, UserService
from stackit.domain.value import NotificationId, UserId


class MarkNotificationReadRequest(BaseModel):
    """Mark notification read request."""

    notification_id: str
    user_id: str  # Authenticated user, must be the recipient


class MarkNotificationReadUseCase(BaseUseCase):
    """Use case for marking a single notification as read."""

    def __init__(
        self,
        notification_service: NotificationService,
        user_service: UserService,
        view_builder: ViewBuilder,
    ) -> None:
        self.notification_service = notification_service
        self.user_service = user_service
        self.view_builder = view_builder

    async def execute(self, request: MarkNotificationReadRequest) -> NotificationView:
        """Execute mark read flow.

        Raises:
            NotFoundError: If the notification does not exist
            NotAuthorizedError: If the user is not the recipient
        """
        reader = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        notification = await self.notification_service.mark_as_read(
            NotificationId(UUID(request.notification_id)), reader
        )
        views = await self.view_builder.notifications([notification])
        return views[0]
