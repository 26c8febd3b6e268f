"""In-memory notification repository for testing."""

from typing import List, Optional

from stackit.domain.model.notification import Notification
from stackit.domain.repository.notification import NotificationRepository
from stackit.domain.value import NotificationId, UserId

from .store import InMemoryStore


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _notifications(self) -> dict[NotificationId, Notification]:
        return self._store.notifications

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 50
    ) -> List[Notification]:
        """Find a user's notifications, newest first."""
        notifications = [
            n for n in self._notifications.values() if n.recipient_id == recipient_id
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[:limit]

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def mark_as_read(self, notification_id: NotificationId) -> None:
        """Mark a notification as read."""
        current = self._notifications.get(notification_id)
        if current:
            self._notifications[notification_id] = current.model_copy(
                update={"read": True}
            )

    async def mark_all_as_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a user as read."""
        updated = 0
        for nid, notification in list(self._notifications.items()):
            if notification.recipient_id == recipient_id and not notification.read:
                self._notifications[nid] = notification.model_copy(
                    update={"read": True}
                )
                updated += 1
        return updated

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        return sum(
            1
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not n.read
        )
