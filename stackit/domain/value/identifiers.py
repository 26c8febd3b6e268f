"""Strongly typed identifiers for StackIt domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
NotificationId = NewType("NotificationId", UUID)
