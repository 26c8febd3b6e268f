"""Vote on answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.projection import AnswerView, ViewBuilder
from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import VoteService
from stackit.domain.value import AnswerId, UserId, VoteType


class VoteAnswerRequest(BaseModel):
    """Vote on answer request."""

    answer_id: str
    user_id: str  # Authenticated voter
    vote_type: VoteType


class VoteAnswerUseCase(BaseUseCase):
    """Use case for upvoting or downvoting an answer."""

    def __init__(self, vote_service: VoteService, view_builder: ViewBuilder) -> None:
        self.vote_service = vote_service
        self.view_builder = view_builder

    async def execute(self, request: VoteAnswerRequest) -> AnswerView:
        """Execute vote flow.

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer = await self.vote_service.vote_on_answer(
            AnswerId(UUID(request.answer_id)),
            UserId(UUID(request.user_id)),
            request.vote_type,
        )
        return await self.view_builder.answer(answer)
