"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stackit.domain.model.notification import Notification
from stackit.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Defines the contract for notification persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: The notification's unique identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 50
    ) -> List[Notification]:
        """Find a user's notifications, newest first.

        Args:
            recipient_id: The recipient's ID
            limit: Maximum number of notifications to return

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create).

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def mark_as_read(self, notification_id: NotificationId) -> None:
        """Mark one notification as read.

        Args:
            notification_id: The notification's unique identifier
        """
        pass

    @abstractmethod
    async def mark_all_as_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a user as read.

        Args:
            recipient_id: The recipient's ID

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications.

        Args:
            recipient_id: The recipient's ID

        Returns:
            Number of unread notifications
        """
        pass
