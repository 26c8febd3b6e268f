"""Shared in-memory storage backing the in-memory repositories."""

from dataclasses import dataclass, field

from stackit.domain.model import Answer, Notification, Question, User
from stackit.domain.value import AnswerId, NotificationId, QuestionId, UserId


@dataclass
class InMemoryStore:
    """Entity tables shared by every in-memory repository of one container.

    Repositories are created per request; the store outlives them so data
    written in one request is visible in the next.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    questions: dict[QuestionId, Question] = field(default_factory=dict)
    answers: dict[AnswerId, Answer] = field(default_factory=dict)
    notifications: dict[NotificationId, Notification] = field(default_factory=dict)
