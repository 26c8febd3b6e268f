"""Reputation domain service.

Owners of questions and answers gain reputation for new upvotes and
accepted answers and lose a little for new downvotes. Reputation is
tracked independently of vote counts: removing or switching a vote never
refunds what was already granted or deducted.
"""

from typing import Optional

import logfire

from stackit.config import ReputationSettings
from stackit.domain.model import VoteOutcome
from stackit.domain.repository import UserRepository
from stackit.domain.value import UserId, VotableType, VoteType

from .base import Service


class ReputationService(Service):
    """Domain service for reputation changes."""

    def __init__(
        self,
        user_repository: UserRepository,
        reputation_settings: ReputationSettings,
    ) -> None:
        """Initialize reputation service.

        Args:
            user_repository: User repository
            reputation_settings: Reputation deltas
        """
        self.user_repository = user_repository
        self.settings = reputation_settings

    async def adjust(self, user_id: UserId, delta: int) -> Optional[int]:
        """Add ``delta`` to a user's reputation, never going below zero.

        Args:
            user_id: User whose reputation changes
            delta: Amount to add (negative for penalties)

        Returns:
            New reputation, or None if the user no longer exists
        """
        with logfire.span(
            "reputation_service.adjust", user_id=str(user_id), delta=delta
        ):
            reputation = await self.user_repository.adjust_reputation(user_id, delta)
            if reputation is None:
                logfire.warn("Reputation change for unknown user", user_id=str(user_id))
            else:
                logfire.info(
                    "Reputation adjusted",
                    user_id=str(user_id),
                    delta=delta,
                    reputation=reputation,
                )
            return reputation

    def vote_delta(self, votable_type: VotableType, outcome: VoteOutcome) -> int:
        """Reputation change earned by the owner for a vote outcome.

        Only a new vote counts; toggles and switches are worth nothing.
        """
        if not outcome.is_new_vote:
            return 0
        if outcome.current == VoteType.DOWNVOTE:
            return self.settings.downvote
        if votable_type == VotableType.QUESTION:
            return self.settings.question_upvote
        return self.settings.answer_upvote

    async def reward_vote(
        self, votable_type: VotableType, owner_id: UserId, outcome: VoteOutcome
    ) -> Optional[int]:
        """Apply the reputation change for a vote on the owner's content.

        Returns:
            New reputation, or None if nothing changed
        """
        delta = self.vote_delta(votable_type, outcome)
        if delta == 0:
            return None
        return await self.adjust(owner_id, delta)

    async def reward_acceptance(self, owner_id: UserId) -> Optional[int]:
        """Grant the accepted-answer bonus to the answer owner.

        Applied on every accept call, including re-accepting the same answer.
        """
        return await self.adjust(owner_id, self.settings.accepted_answer)
