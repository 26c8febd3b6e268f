"""Update question use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.projection import QuestionView, ViewBuilder
from stackit.domain.policy import Action, ensure_can_mutate
from stackit.domain.service import QuestionService, UserService
from stackit.domain.value import QuestionId, UserId

from stackit.application.usecase.base import BaseUseCase


class UpdateQuestionRequest(BaseModel):
    """Update question request.

    Omitted fields keep their current value.
    """

    question_id: str
    user_id: str  # Authenticated user
    title: str | None = None
    description: str | None = None
    tags: list[str] | None = None


class UpdateQuestionUseCase(BaseUseCase):
    """Use case for editing a question. Only the owner may edit."""

    def __init__(
        self,
        question_service: QuestionService,
        user_service: UserService,
        view_builder: ViewBuilder,
    ) -> None:
        self.question_service = question_service
        self.user_service = user_service
        self.view_builder = view_builder

    async def execute(self, request: UpdateQuestionRequest) -> QuestionView:
        """Execute update question flow.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the user does not own the question
        """
        question = await self.question_service.get_question_by_id(
            QuestionId(UUID(request.question_id))
        )
        actor = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        ensure_can_mutate(
            actor, question.user_id, Action.UPDATE, "question", str(question.id)
        )

        updated = await self.question_service.update_question(
            question,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
        return await self.view_builder.question(updated)
