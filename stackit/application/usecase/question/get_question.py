"""Get question use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.projection import QuestionDetailView, ViewBuilder
from stackit.domain.repository import AnswerSortOrder
from stackit.domain.service import AnswerService, QuestionService
from stackit.domain.value import QuestionId

from stackit.application.usecase.base import BaseUseCase


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str


class GetQuestionUseCase(BaseUseCase):
    """Use case for viewing a question with its answers.

    Every call counts as a view.
    """

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        view_builder: ViewBuilder,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            view_builder: Response projection
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.view_builder = view_builder

    async def execute(self, request: GetQuestionRequest) -> QuestionDetailView:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(UUID(request.question_id))

        question = await self.question_service.record_view(question_id)
        answers = await self.answer_service.list_answers(
            question_id, sort=AnswerSortOrder.TOP_VOTED
        )

        return await self.view_builder.question_detail(question, answers)
