"""Vote domain service."""

from typing import cast

import logfire

from stackit.domain.error import NotFoundError
from stackit.domain.model import Answer, Question
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.value import AnswerId, QuestionId, UserId, VotableType, VoteType

from .base import Service
from .reputation_service import ReputationService


class VoteService(Service):
    """Domain service for vote operations.

    Entities are loaded with a row lock so concurrent votes on the same
    item are applied one after the other.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        reputation_service: ReputationService,
    ) -> None:
        """Initialize vote service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            reputation_service: Reputation domain service
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.reputation_service = reputation_service

    async def vote_on_question(
        self, question_id: QuestionId, voter_id: UserId, vote_type: VoteType
    ) -> Question:
        """Cast, switch or withdraw a vote on a question.

        Args:
            question_id: Question ID
            voter_id: User casting the vote
            vote_type: Requested vote direction

        Returns:
            Question with the updated vote ledger

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "vote_service.vote_on_question",
            question_id=str(question_id),
            voter_id=str(voter_id),
            vote_type=vote_type.value,
        ):
            question = await self.question_repository.find_by_id_for_update(
                question_id
            )
            if not question:
                logfire.warn("Vote on non-existent question", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            outcome = question.cast_vote(voter_id, vote_type)
            updated = cast(Question, outcome.entity)
            await self.question_repository.save_votes(updated)

            await self.reputation_service.reward_vote(
                VotableType.QUESTION, question.user_id, outcome
            )

            logfire.info(
                "Question vote recorded",
                question_id=str(question_id),
                previous=outcome.previous,
                current=outcome.current,
                vote_count=updated.vote_count,
            )
            return updated

    async def vote_on_answer(
        self, answer_id: AnswerId, voter_id: UserId, vote_type: VoteType
    ) -> Answer:
        """Cast, switch or withdraw a vote on an answer.

        Args:
            answer_id: Answer ID
            voter_id: User casting the vote
            vote_type: Requested vote direction

        Returns:
            Answer with the updated vote ledger

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span(
            "vote_service.vote_on_answer",
            answer_id=str(answer_id),
            voter_id=str(voter_id),
            vote_type=vote_type.value,
        ):
            answer = await self.answer_repository.find_by_id_for_update(answer_id)
            if not answer:
                logfire.warn("Vote on non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            outcome = answer.cast_vote(voter_id, vote_type)
            updated = cast(Answer, outcome.entity)
            await self.answer_repository.save_votes(updated)

            await self.reputation_service.reward_vote(
                VotableType.ANSWER, answer.user_id, outcome
            )

            logfire.info(
                "Answer vote recorded",
                answer_id=str(answer_id),
                previous=outcome.previous,
                current=outcome.current,
                vote_count=updated.vote_count,
            )
            return updated
