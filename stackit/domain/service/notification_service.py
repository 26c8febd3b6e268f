"""Notification domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from stackit.config import ForumSettings
from stackit.domain.error import NotFoundError
from stackit.domain.model import Notification, Question, User
from stackit.domain.policy import Action, ensure_can_mutate
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    UserId,
)

from .base import Service


def title_excerpt(title: str, length: int) -> str:
    """Cut a title to ``length`` characters, marking the cut with ``...``."""
    if len(title) <= length:
        return title
    return title[:length] + "..."


class NotificationService(Service):
    """Domain service for notifications."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        forum_settings: ForumSettings,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            forum_settings: Excerpt length and listing limit
        """
        self.notification_repository = notification_repository
        self.settings = forum_settings

    async def emit(
        self,
        notification_type: NotificationType,
        sender: User,
        recipient_id: UserId,
        question: Question,
        answer_id: Optional[AnswerId] = None,
    ) -> Optional[Notification]:
        """Record a notification for ``recipient_id``.

        Nothing is recorded when the sender is the recipient. Failures are
        logged and never propagate to the caller.

        Args:
            notification_type: Event that happened
            sender: User who caused the event
            recipient_id: User to notify
            question: Question the event relates to
            answer_id: Answer the event relates to

        Returns:
            The saved notification, or None if none was recorded
        """
        with logfire.span(
            "notification_service.emit",
            type=notification_type.value,
            sender_id=str(sender.id),
            recipient_id=str(recipient_id),
        ):
            if sender.id == recipient_id:
                logfire.debug("Skipping self notification", user_id=str(sender.id))
                return None

            message = notification_type.message_template.format(
                username=sender.username.root,
                excerpt=title_excerpt(question.title, self.settings.title_excerpt_length),
            )

            try:
                notification = Notification(
                    id=NotificationId(uuid4()),
                    recipient_id=recipient_id,
                    sender_id=sender.id,
                    type=notification_type,
                    question_id=question.id,
                    answer_id=answer_id,
                    message=message,
                    created_at=datetime.now(),
                )
                saved = await self.notification_repository.save(notification)
            except Exception as e:
                logfire.error(
                    "Failed to record notification",
                    type=notification_type.value,
                    recipient_id=str(recipient_id),
                    error=str(e),
                )
                return None

            logfire.info(
                "Notification recorded",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
            )
            return saved

    async def list_for_user(
        self, user_id: UserId, limit: Optional[int] = None
    ) -> list[Notification]:
        """List a user's notifications, newest first.

        Args:
            user_id: Recipient
            limit: Maximum number returned (defaults to the configured limit)

        Returns:
            Notifications
        """
        with logfire.span("notification_service.list_for_user", user_id=str(user_id)):
            return await self.notification_repository.find_by_recipient(
                user_id, limit=limit or self.settings.notification_limit
            )

    async def mark_as_read(
        self, notification_id: NotificationId, reader: User
    ) -> Notification:
        """Mark one of the user's notifications as read.

        Args:
            notification_id: Notification ID
            reader: Authenticated user, must be the recipient

        Returns:
            The read notification

        Raises:
            NotFoundError: If the notification does not exist
            NotAuthorizedError: If the user is not the recipient
        """
        with logfire.span(
            "notification_service.mark_as_read",
            notification_id=str(notification_id),
            user_id=str(reader.id),
        ):
            notification = await self.notification_repository.find_by_id(
                notification_id
            )
            if not notification:
                logfire.warn(
                    "Notification not found", notification_id=str(notification_id)
                )
                raise NotFoundError("Notification", str(notification_id))

            ensure_can_mutate(
                reader,
                notification.recipient_id,
                Action.READ_PRIVATE,
                "notification",
                str(notification_id),
            )

            if not notification.read:
                await self.notification_repository.mark_as_read(notification_id)
            return notification.model_copy(update={"read": True})

    async def mark_all_as_read(self, user_id: UserId) -> int:
        """Mark every unread notification of the user as read.

        Returns:
            Number of notifications updated
        """
        with logfire.span(
            "notification_service.mark_all_as_read", user_id=str(user_id)
        ):
            updated = await self.notification_repository.mark_all_as_read(user_id)
            logfire.info("Notifications marked read", user_id=str(user_id), count=updated)
            return updated

    async def unread_count(self, user_id: UserId) -> int:
        """Count the user's unread notifications."""
        with logfire.span("notification_service.unread_count", user_id=str(user_id)):
            return await self.notification_repository.count_unread(user_id)
