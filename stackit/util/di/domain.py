"""Domain layer DI providers."""

from dishka import Scope, provide

from stackit.config import AuthSettings, ForumSettings, ReputationSettings
from stackit.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.service import (
    AcceptanceService,
    AnswerService,
    JWTService,
    NotificationService,
    QuestionService,
    ReputationService,
    UserService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_reputation_service(
        self,
        user_repository: UserRepository,
        reputation_settings: ReputationSettings,
    ) -> ReputationService:
        """Provide reputation domain service."""
        return ReputationService(
            user_repository=user_repository,
            reputation_settings=reputation_settings,
        )

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
        )

    @provide
    def get_vote_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        reputation_service: ReputationService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            reputation_service=reputation_service,
        )

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        forum_settings: ForumSettings,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            forum_settings=forum_settings,
        )

    @provide
    def get_acceptance_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        reputation_service: ReputationService,
        notification_service: NotificationService,
    ) -> AcceptanceService:
        """Provide acceptance domain service."""
        return AcceptanceService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            reputation_service=reputation_service,
            notification_service=notification_service,
        )
