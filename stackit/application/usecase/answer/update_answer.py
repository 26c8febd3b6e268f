"""Update answer use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from stackit.application.projection import AnswerView, ViewBuilder
from stackit.application.usecase.base import BaseUseCase
from stackit.domain.policy import Action, ensure_can_mutate
from stackit.domain.service import AnswerService, UserService
from stackit.domain.value import AnswerId, UserId


class UpdateAnswerRequest(BaseModel):
    """Update answer request."""

    answer_id: str
    user_id: str  # Authenticated user
    content: str = Field(min_length=1)


class UpdateAnswerUseCase(BaseUseCase):
    """Use case for editing an answer. Only the owner may edit."""

    def __init__(
        self,
        answer_service: AnswerService,
        user_service: UserService,
        view_builder: ViewBuilder,
    ) -> None:
        self.answer_service = answer_service
        self.user_service = user_service
        self.view_builder = view_builder

    async def execute(self, request: UpdateAnswerRequest) -> AnswerView:
        """Execute update answer flow.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the user does not own the answer
        """
        answer = await self.answer_service.get_answer_by_id(
            AnswerId(UUID(request.answer_id))
        )
        actor = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        ensure_can_mutate(actor, answer.user_id, Action.UPDATE, "answer", str(answer.id))

        updated = await self.answer_service.update_content(answer, request.content)
        return await self.view_builder.answer(updated)
