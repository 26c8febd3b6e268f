"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Notification
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import NotificationId, UserId
from stackit.persistence.mappers import notification_to_dict, row_to_notification
from stackit.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_notification(dict(row)) if row else None

    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 50
    ) -> List[Notification]:
        """Find a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
            .order_by(desc(notifications_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        The insert runs in a SAVEPOINT so a failure here leaves the
        surrounding request transaction usable.
        """
        async with self.session.begin_nested():
            stmt = notifications_table.insert().values(
                **notification_to_dict(notification)
            )
            await self.session.execute(stmt)
        return notification

    async def mark_as_read(self, notification_id: NotificationId) -> None:
        """Mark a notification as read."""
        stmt = (
            notifications_table.update()
            .where(notifications_table.c.id == notification_id)
            .values(read=True)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def mark_all_as_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a user as read."""
        stmt = (
            notifications_table.update()
            .where(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.read.is_(False),
            )
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.read.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
