"""List answers use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.projection import AnswerView, ViewBuilder
from stackit.application.usecase.base import BaseUseCase
from stackit.domain.repository import AnswerSortOrder
from stackit.domain.service import AnswerService, QuestionService
from stackit.domain.value import QuestionId


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: str


class ListAnswersResponse(BaseModel):
    """List answers response."""

    answers: list[AnswerView]


class ListAnswersUseCase(BaseUseCase):
    """Use case for listing answers: accepted first, then by votes, then newest."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        view_builder: ViewBuilder,
    ) -> None:
        self.answer_service = answer_service
        self.question_service = question_service
        self.view_builder = view_builder

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """List the answers of an existing question.

        Raises:
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(UUID(request.question_id))
        await self.question_service.get_question_by_id(question_id)

        answers = await self.answer_service.list_answers(
            question_id, sort=AnswerSortOrder.RANKED
        )
        return ListAnswersResponse(answers=await self.view_builder.answers(answers))
