"""Create answer use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from stackit.application.projection import AnswerView, ViewBuilder
from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import (
    AnswerService,
    NotificationService,
    QuestionService,
    UserService,
)
from stackit.domain.value import NotificationType, QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str
    user_id: str  # Authenticated user
    content: str = Field(min_length=1)


class CreateAnswerUseCase(BaseUseCase):
    """Use case for answering a question.

    The question owner is notified unless they answered their own question.
    """

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
        notification_service: NotificationService,
        view_builder: ViewBuilder,
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
            user_service: User domain service
            notification_service: Notification domain service
            view_builder: Response projection
        """
        self.answer_service = answer_service
        self.question_service = question_service
        self.user_service = user_service
        self.notification_service = notification_service
        self.view_builder = view_builder

    async def execute(self, request: CreateAnswerRequest) -> AnswerView:
        """Execute create answer flow.

        Steps:
        1. Load the question and the author
        2. Create the answer
        3. Notify the question owner (best-effort)

        Raises:
            NotFoundError: If the question does not exist
            ReferentialError: If the question disappears while answering
        """
        question = await self.question_service.get_question_by_id(
            QuestionId(UUID(request.question_id))
        )
        author = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        answer = await self.answer_service.create_answer(
            question_id=question.id, user_id=author.id, content=request.content
        )

        await self.notification_service.emit(
            NotificationType.ANSWER,
            sender=author,
            recipient_id=question.user_id,
            question=question,
            answer_id=answer.id,
        )

        return await self.view_builder.answer(answer)
