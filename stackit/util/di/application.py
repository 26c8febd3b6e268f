"""Application layer DI providers."""

from dishka import Scope, provide

from stackit.application.projection import ViewBuilder
from stackit.application.usecase.answer import (
    AcceptAnswerUseCase,
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    ListAnswersUseCase,
    UpdateAnswerUseCase,
)
from stackit.application.usecase.auth import GetCurrentUserUseCase
from stackit.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkAllReadUseCase,
    MarkNotificationReadUseCase,
    UnreadCountUseCase,
)
from stackit.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from stackit.application.usecase.user import GetUserProfileUseCase
from stackit.application.usecase.vote import VoteAnswerUseCase, VoteQuestionUseCase
from stackit.config import ForumSettings
from stackit.domain.service import (
    AcceptanceService,
    AnswerService,
    JWTService,
    NotificationService,
    QuestionService,
    UserService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_view_builder(
        self, user_service: UserService, question_service: QuestionService
    ) -> ViewBuilder:
        """Provide response projection."""
        return ViewBuilder(user_service=user_service, question_service=question_service)

    # Auth use cases
    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Question use cases
    @provide
    def get_create_question_use_case(
        self, question_service: QuestionService, view_builder: ViewBuilder
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service, view_builder=view_builder
        )

    @provide
    def get_list_questions_use_case(
        self,
        question_service: QuestionService,
        view_builder: ViewBuilder,
        forum_settings: ForumSettings,
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service,
            view_builder=view_builder,
            forum_settings=forum_settings,
        )

    @provide
    def get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        view_builder: ViewBuilder,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            view_builder=view_builder,
        )

    @provide
    def get_update_question_use_case(
        self,
        question_service: QuestionService,
        user_service: UserService,
        view_builder: ViewBuilder,
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            question_service=question_service,
            user_service=user_service,
            view_builder=view_builder,
        )

    @provide
    def get_delete_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    # Answer use cases
    @provide
    def get_create_answer_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
        notification_service: NotificationService,
        view_builder: ViewBuilder,
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service,
            question_service=question_service,
            user_service=user_service,
            notification_service=notification_service,
            view_builder=view_builder,
        )

    @provide
    def get_list_answers_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        view_builder: ViewBuilder,
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(
            answer_service=answer_service,
            question_service=question_service,
            view_builder=view_builder,
        )

    @provide
    def get_update_answer_use_case(
        self,
        answer_service: AnswerService,
        user_service: UserService,
        view_builder: ViewBuilder,
    ) -> UpdateAnswerUseCase:
        """Provide update answer use case."""
        return UpdateAnswerUseCase(
            answer_service=answer_service,
            user_service=user_service,
            view_builder=view_builder,
        )

    @provide
    def get_delete_answer_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(
            answer_service=answer_service, user_service=user_service
        )

    @provide
    def get_accept_answer_use_case(
        self,
        acceptance_service: AcceptanceService,
        user_service: UserService,
        view_builder: ViewBuilder,
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(
            acceptance_service=acceptance_service,
            user_service=user_service,
            view_builder=view_builder,
        )

    # Vote use cases
    @provide
    def get_vote_question_use_case(
        self, vote_service: VoteService, view_builder: ViewBuilder
    ) -> VoteQuestionUseCase:
        """Provide vote on question use case."""
        return VoteQuestionUseCase(vote_service=vote_service, view_builder=view_builder)

    @provide
    def get_vote_answer_use_case(
        self, vote_service: VoteService, view_builder: ViewBuilder
    ) -> VoteAnswerUseCase:
        """Provide vote on answer use case."""
        return VoteAnswerUseCase(vote_service=vote_service, view_builder=view_builder)

    # Notification use cases
    @provide
    def get_list_notifications_use_case(
        self, notification_service: NotificationService, view_builder: ViewBuilder
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            notification_service=notification_service, view_builder=view_builder
        )

    @provide
    def get_mark_notification_read_use_case(
        self,
        notification_service: NotificationService,
        user_service: UserService,
        view_builder: ViewBuilder,
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(
            notification_service=notification_service,
            user_service=user_service,
            view_builder=view_builder,
        )

    @provide
    def get_mark_all_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllReadUseCase(notification_service=notification_service)

    @provide
    def get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> UnreadCountUseCase:
        """Provide unread notification count use case."""
        return UnreadCountUseCase(notification_service=notification_service)

    # User use cases
    @provide
    def get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)
