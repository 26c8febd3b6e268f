"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from stackit.domain.model import Answer, Notification, Question, User
from stackit.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
    UserRole,
)
from stackit.domain.value.types import Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return None if value is None else _uuid(value)


def _uuid_list(values: Any) -> list[UserId]:
    return [UserId(_uuid(v)) for v in (values or [])]


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        avatar=row.get("avatar"),
        role=UserRole(row.get("role", UserRole.USER.value)),
        reputation=row["reputation"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    ``vote_count`` is recomputed from the membership lists by the model.
    """
    accepted = _optional_uuid(row.get("accepted_answer"))
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        tags=list(row.get("tags") or []),
        user_id=UserId(_uuid(row["user_id"])),
        views=row["views"],
        upvotes=_uuid_list(row.get("upvotes")),
        downvotes=_uuid_list(row.get("downvotes")),
        accepted_answer=AnswerId(accepted) if accepted else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict."""
    return question.model_dump()


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        content=row["content"],
        user_id=UserId(_uuid(row["user_id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        upvotes=_uuid_list(row.get("upvotes")),
        downvotes=_uuid_list(row.get("downvotes")),
        is_accepted=row["is_accepted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    question_id = _optional_uuid(row.get("question_id"))
    answer_id = _optional_uuid(row.get("answer_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        sender_id=UserId(_uuid(row["sender_id"])),
        type=NotificationType(row["type"]),
        question_id=QuestionId(question_id) if question_id else None,
        answer_id=AnswerId(answer_id) if answer_id else None,
        message=row["message"],
        read=row["read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
