"""Domain services."""

from .acceptance_service import AcceptanceService
from .answer_service import AnswerService
from .base import Service
from .jwt_service import JWTService
from .notification_service import NotificationService, title_excerpt
from .question_service import QuestionService
from .reputation_service import ReputationService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "AcceptanceService",
    "AnswerService",
    "JWTService",
    "NotificationService",
    "QuestionService",
    "ReputationService",
    "Service",
    "UserService",
    "VoteService",
    "title_excerpt",
]
