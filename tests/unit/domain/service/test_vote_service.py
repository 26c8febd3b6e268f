"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from stackit.domain.error import NotFoundError
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.service import AnswerService, QuestionService, VoteService
from stackit.domain.value import AnswerId, QuestionId, VoteType
from tests.harness import create_env_fixture, create_user

unit_env = create_env_fixture()


class TestVoteOnQuestion:
    """Tests for vote_on_question."""

    @pytest.mark.asyncio
    async def test_upvote_persists_ledger_and_rewards_owner(self, unit_env):
        """A new upvote is stored and the owner earns 5 reputation."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        user_repo = await unit_env.get(UserRepository)
        owner = await create_user(unit_env, "owner")
        voter = await create_user(unit_env, "voter")
        question = await question_service.create_question(
            owner.id, "Why is the sky blue?", "Physics", ["science"]
        )

        # Act
        result = await vote_service.vote_on_question(
            question.id, voter.id, VoteType.UPVOTE
        )

        # Assert
        assert result.upvotes == [voter.id]
        assert result.vote_count == 1
        stored = await question_repo.find_by_id(question.id)
        assert stored.upvotes == [voter.id]
        assert (await user_repo.find_by_id(owner.id)).reputation == 5

    @pytest.mark.asyncio
    async def test_toggle_off_keeps_reputation(self, unit_env):
        """Withdrawing an upvote does not refund the owner's gain."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_service = await unit_env.get(QuestionService)
        user_repo = await unit_env.get(UserRepository)
        owner = await create_user(unit_env, "owner")
        voter = await create_user(unit_env, "voter")
        question = await question_service.create_question(owner.id, "Q", "D", [])

        # Act
        await vote_service.vote_on_question(question.id, voter.id, VoteType.UPVOTE)
        result = await vote_service.vote_on_question(
            question.id, voter.id, VoteType.UPVOTE
        )

        # Assert
        assert result.upvotes == []
        assert result.vote_count == 0
        assert (await user_repo.find_by_id(owner.id)).reputation == 5

    @pytest.mark.asyncio
    async def test_switch_changes_count_by_two_without_reputation(self, unit_env):
        """Switching from upvote to downvote moves the count by two."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_service = await unit_env.get(QuestionService)
        user_repo = await unit_env.get(UserRepository)
        owner = await create_user(unit_env, "owner")
        voter = await create_user(unit_env, "voter")
        question = await question_service.create_question(owner.id, "Q", "D", [])
        await vote_service.vote_on_question(question.id, voter.id, VoteType.UPVOTE)

        # Act
        result = await vote_service.vote_on_question(
            question.id, voter.id, VoteType.DOWNVOTE
        )

        # Assert
        assert result.downvotes == [voter.id]
        assert result.vote_count == -1
        assert (await user_repo.find_by_id(owner.id)).reputation == 5

    @pytest.mark.asyncio
    async def test_self_vote_is_allowed(self, unit_env):
        """Owners may vote on their own content and earn the reward."""
        vote_service = await unit_env.get(VoteService)
        question_service = await unit_env.get(QuestionService)
        user_repo = await unit_env.get(UserRepository)
        owner = await create_user(unit_env, "owner")
        question = await question_service.create_question(owner.id, "Q", "D", [])

        result = await vote_service.vote_on_question(
            question.id, owner.id, VoteType.UPVOTE
        )

        assert result.vote_count == 1
        assert (await user_repo.find_by_id(owner.id)).reputation == 5

    @pytest.mark.asyncio
    async def test_missing_question_raises(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        voter = await create_user(unit_env, "voter")

        with pytest.raises(NotFoundError):
            await vote_service.vote_on_question(
                QuestionId(uuid4()), voter.id, VoteType.UPVOTE
            )


class TestVoteOnAnswer:
    """Tests for vote_on_answer."""

    @pytest.mark.asyncio
    async def test_downvote_penalizes_owner_floored_at_zero(self, unit_env):
        """A downvote costs 2 reputation but never goes negative."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        user_repo = await unit_env.get(UserRepository)
        asker = await create_user(unit_env, "asker")
        author = await create_user(unit_env, "author", reputation=1)
        voter = await create_user(unit_env, "voter")
        question = await question_service.create_question(asker.id, "Q", "D", [])
        answer = await answer_service.create_answer(question.id, author.id, "A")

        # Act
        result = await vote_service.vote_on_answer(
            answer.id, voter.id, VoteType.DOWNVOTE
        )

        # Assert
        assert result.vote_count == -1
        assert (await answer_repo.find_by_id(answer.id)).downvotes == [voter.id]
        assert (await user_repo.find_by_id(author.id)).reputation == 0

    @pytest.mark.asyncio
    async def test_upvote_rewards_answer_owner(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        user_repo = await unit_env.get(UserRepository)
        asker = await create_user(unit_env, "asker")
        author = await create_user(unit_env, "author")
        voter = await create_user(unit_env, "voter")
        question = await question_service.create_question(asker.id, "Q", "D", [])
        answer = await answer_service.create_answer(question.id, author.id, "A")

        await vote_service.vote_on_answer(answer.id, voter.id, VoteType.UPVOTE)

        assert (await user_repo.find_by_id(author.id)).reputation == 10

    @pytest.mark.asyncio
    async def test_missing_answer_raises(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        voter = await create_user(unit_env, "voter")

        with pytest.raises(NotFoundError):
            await vote_service.vote_on_answer(
                AnswerId(uuid4()), voter.id, VoteType.UPVOTE
            )
