"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.policy import Action, ensure_can_mutate
from stackit.domain.service import QuestionService, UserService
from stackit.domain.value import QuestionId, UserId

from stackit.application.usecase.base import BaseUseCase


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str
    user_id: str  # Authenticated user


class DeleteQuestionResponse(BaseModel):
    """Delete question response."""

    message: str = "Question removed"


class DeleteQuestionUseCase(BaseUseCase):
    """Use case for removing a question and its answers.

    Allowed for the owner and for admins.
    """

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        """Execute delete question flow.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the user is neither owner nor admin
        """
        question = await self.question_service.get_question_by_id(
            QuestionId(UUID(request.question_id))
        )
        actor = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        ensure_can_mutate(
            actor, question.user_id, Action.DELETE, "question", str(question.id)
        )

        await self.question_service.delete_question(question.id)
        return DeleteQuestionResponse()
