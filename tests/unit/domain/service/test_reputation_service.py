"""Unit tests for ReputationService."""

from uuid import uuid4

import pytest

from stackit.domain.model import Question, VoteOutcome
from stackit.domain.repository import UserRepository
from stackit.domain.service import ReputationService
from stackit.domain.value import QuestionId, UserId, VotableType, VoteType
from tests.harness import create_env_fixture, create_user

unit_env = create_env_fixture()


def outcome(previous, current) -> VoteOutcome:
    question = Question(
        id=QuestionId(uuid4()),
        title="t",
        description="d",
        user_id=UserId(uuid4()),
    )
    return VoteOutcome(entity=question, previous=previous, current=current)


class TestVoteDelta:
    """Reputation earned per vote outcome."""

    @pytest.mark.asyncio
    async def test_new_upvote_on_question(self, unit_env):
        service = await unit_env.get(ReputationService)

        delta = service.vote_delta(VotableType.QUESTION, outcome(None, VoteType.UPVOTE))

        assert delta == 5

    @pytest.mark.asyncio
    async def test_new_upvote_on_answer(self, unit_env):
        service = await unit_env.get(ReputationService)

        delta = service.vote_delta(VotableType.ANSWER, outcome(None, VoteType.UPVOTE))

        assert delta == 10

    @pytest.mark.asyncio
    @pytest.mark.parametrize("votable_type", list(VotableType))
    async def test_new_downvote(self, unit_env, votable_type):
        service = await unit_env.get(ReputationService)

        delta = service.vote_delta(votable_type, outcome(None, VoteType.DOWNVOTE))

        assert delta == -2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "previous,current",
        [
            (VoteType.UPVOTE, None),
            (VoteType.DOWNVOTE, None),
            (VoteType.UPVOTE, VoteType.DOWNVOTE),
            (VoteType.DOWNVOTE, VoteType.UPVOTE),
        ],
    )
    async def test_withdrawals_and_switches_are_worth_nothing(
        self, unit_env, previous, current
    ):
        """Removing or switching a vote never refunds or re-grants."""
        service = await unit_env.get(ReputationService)

        delta = service.vote_delta(VotableType.ANSWER, outcome(previous, current))

        assert delta == 0


class TestAdjust:
    """Persisted reputation changes."""

    @pytest.mark.asyncio
    async def test_reputation_never_drops_below_zero(self, unit_env):
        """A penalty larger than the balance floors at zero."""
        # Arrange
        service = await unit_env.get(ReputationService)
        user_repo = await unit_env.get(UserRepository)
        user = await create_user(unit_env, reputation=1)

        # Act
        reputation = await service.adjust(user.id, -2)

        # Assert
        assert reputation == 0
        stored = await user_repo.find_by_id(user.id)
        assert stored.reputation == 0

    @pytest.mark.asyncio
    async def test_unknown_user_is_ignored(self, unit_env):
        service = await unit_env.get(ReputationService)

        assert await service.adjust(UserId(uuid4()), 10) is None

    @pytest.mark.asyncio
    async def test_acceptance_bonus(self, unit_env):
        service = await unit_env.get(ReputationService)
        user = await create_user(unit_env, reputation=3)

        assert await service.reward_acceptance(user.id) == 18

    @pytest.mark.asyncio
    async def test_reward_vote_skips_zero_delta(self, unit_env):
        """A withdrawal does not touch the owner at all."""
        service = await unit_env.get(ReputationService)
        user = await create_user(unit_env, reputation=7)

        result = await service.reward_vote(
            VotableType.QUESTION, user.id, outcome(VoteType.UPVOTE, None)
        )

        assert result is None
