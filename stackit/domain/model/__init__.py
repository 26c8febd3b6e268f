"""Domain model entities for StackIt."""

from stackit.domain.model.answer import Answer
from stackit.domain.model.notification import Notification
from stackit.domain.model.question import Question
from stackit.domain.model.user import User
from stackit.domain.model.vote import Votable, VoteOutcome

__all__ = [
    "User",
    "Question",
    "Answer",
    "Notification",
    "Votable",
    "VoteOutcome",
]
