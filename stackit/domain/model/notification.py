"""Notification entity.

Notifications tell a user that someone answered their question or
accepted their answer. They only ever move from unread to read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from stackit.domain.model.common import DomainModel
from stackit.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)


class Notification(DomainModel):
    """Notification entity."""

    id: NotificationId
    recipient_id: UserId
    sender_id: UserId
    type: NotificationType
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    message: str = Field(min_length=1)
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_not_self_addressed(self) -> "Notification":
        """Users are never notified about their own actions."""
        if self.recipient_id == self.sender_id:
            raise ValueError("Notification recipient and sender must differ")
        return self
