"""Vote on question use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.projection import QuestionView, ViewBuilder
from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import VoteService
from stackit.domain.value import QuestionId, UserId, VoteType


class VoteQuestionRequest(BaseModel):
    """Vote on question request."""

    question_id: str
    user_id: str  # Authenticated voter
    vote_type: VoteType


class VoteQuestionUseCase(BaseUseCase):
    """Use case for upvoting or downvoting a question.

    Repeating the same vote withdraws it.
    """

    def __init__(self, vote_service: VoteService, view_builder: ViewBuilder) -> None:
        """Initialize vote question use case.

        Args:
            vote_service: Vote domain service
            view_builder: Response projection
        """
        self.vote_service = vote_service
        self.view_builder = view_builder

    async def execute(self, request: VoteQuestionRequest) -> QuestionView:
        """Execute vote flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        question = await self.vote_service.vote_on_question(
            QuestionId(UUID(request.question_id)),
            UserId(UUID(request.user_id)),
            request.vote_type,
        )
        return await self.view_builder.question(question)
