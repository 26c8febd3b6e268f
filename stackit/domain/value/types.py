"""Domain value objects for StackIt.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from stackit.domain.value.common import RootValueObject


class VoteType(str, Enum):
    """Direction of a vote on a question or answer."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "user"
    ADMIN = "admin"


class NotificationType(str, Enum):
    """Event that produced a notification."""

    ANSWER = "answer"  # Someone answered the recipient's question
    ACCEPT = "accept"  # The recipient's answer was accepted

    @property
    def message_template(self) -> str:
        """Message format, filled with ``username`` and ``excerpt``."""
        if self is NotificationType.ANSWER:
            return '{username} answered your question: "{excerpt}"'
        return '{username} accepted your answer on: "{excerpt}"'


class Username(RootValueObject[str]):
    """Public display name of a user."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank and within length limits."""
        if not v.strip():
            raise ValueError("Username must not be blank")
        if len(v) > 50:
            raise ValueError("Username must be at most 50 characters")
        return v
