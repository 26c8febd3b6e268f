"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.domain.policy import Action, ensure_can_mutate
from stackit.domain.service import AnswerService, UserService
from stackit.domain.value import AnswerId, UserId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str
    user_id: str  # Authenticated user


class DeleteAnswerResponse(BaseModel):
    """Delete answer response."""

    message: str = "Answer removed"


class DeleteAnswerUseCase(BaseUseCase):
    """Use case for removing an answer. Allowed for the owner and for admins."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: DeleteAnswerRequest) -> DeleteAnswerResponse:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the user is neither owner nor admin
        """
        answer = await self.answer_service.get_answer_by_id(
            AnswerId(UUID(request.answer_id))
        )
        actor = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        ensure_can_mutate(actor, answer.user_id, Action.DELETE, "answer", str(answer.id))

        await self.answer_service.delete_answer(answer)
        return DeleteAnswerResponse()
