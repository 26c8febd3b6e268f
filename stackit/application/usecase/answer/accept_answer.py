"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.projection import AnswerView, ViewBuilder
from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import AcceptanceService, UserService
from stackit.domain.value import AnswerId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    answer_id: str
    user_id: str  # Authenticated user, must own the question


class AcceptAnswerUseCase(BaseUseCase):
    """Use case for accepting an answer on one's own question."""

    def __init__(
        self,
        acceptance_service: AcceptanceService,
        user_service: UserService,
        view_builder: ViewBuilder,
    ) -> None:
        self.acceptance_service = acceptance_service
        self.user_service = user_service
        self.view_builder = view_builder

    async def execute(self, request: AcceptAnswerRequest) -> AnswerView:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If the answer or its question does not exist
            NotAuthorizedError: If the user does not own the question
        """
        caller = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        answer = await self.acceptance_service.accept_answer(
            AnswerId(UUID(request.answer_id)), caller
        )
        return await self.view_builder.answer(answer)
