"""Domain value objects for StackIt."""

from stackit.domain.value.identifiers import (
    AnswerId,
    NotificationId,
    QuestionId,
    UserId,
)
from stackit.domain.value.types import (
    NotificationType,
    UserRole,
    Username,
    VotableType,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "NotificationId",
    # Types
    "NotificationType",
    "UserRole",
    "Username",
    "VotableType",
    "VoteType",
]
