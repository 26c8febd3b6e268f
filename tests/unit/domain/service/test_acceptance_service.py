"""Unit tests for AcceptanceService."""

from uuid import uuid4

import pytest

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.service import AcceptanceService, AnswerService, QuestionService
from stackit.domain.value import AnswerId, NotificationType, UserRole
from tests.harness import create_env_fixture, create_user

unit_env = create_env_fixture()


async def seed_question_with_answers(env, answer_count: int = 2):
    """Create an asker, a question and ``answer_count`` answers by other users."""
    question_service = await env.get(QuestionService)
    answer_service = await env.get(AnswerService)

    asker = await create_user(env, "asker")
    question = await question_service.create_question(
        asker.id, "How do I merge two dicts in Python?", "Looking for idioms", []
    )
    answers = []
    for i in range(answer_count):
        author = await create_user(env, f"author{i}")
        answers.append(
            await answer_service.create_answer(question.id, author.id, f"Answer {i}")
        )
    return asker, question, answers


class TestAcceptAnswer:
    """Tests for accept_answer."""

    @pytest.mark.asyncio
    async def test_accept_marks_answer_and_question(self, unit_env):
        """Accepting sets the flag on the answer and the reference on the question."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, (answer, _) = await seed_question_with_answers(unit_env)

        # Act
        result = await acceptance_service.accept_answer(answer.id, asker)

        # Assert
        assert result.is_accepted
        assert (await answer_repo.find_by_id(answer.id)).is_accepted
        assert (await question_repo.find_by_id(question.id)).accepted_answer == answer.id

    @pytest.mark.asyncio
    async def test_accept_rewards_owner_and_notifies(self, unit_env):
        """The answer owner gains 15 and receives an accept notification."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, question, (answer, _) = await seed_question_with_answers(unit_env)

        # Act
        await acceptance_service.accept_answer(answer.id, asker)

        # Assert
        assert (await user_repo.find_by_id(answer.user_id)).reputation == 15
        notifications = await notification_repo.find_by_recipient(answer.user_id)
        accepts = [n for n in notifications if n.type == NotificationType.ACCEPT]
        assert len(accepts) == 1
        assert accepts[0].sender_id == asker.id
        assert accepts[0].question_id == question.id
        assert accepts[0].answer_id == answer.id
        assert accepts[0].message == (
            'asker accepted your answer on: "How do I merge two dicts in Py..."'
        )

    @pytest.mark.asyncio
    async def test_accepting_another_answer_demotes_previous(self, unit_env):
        """Only one answer per question is accepted at a time."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, (first, second) = await seed_question_with_answers(unit_env)
        await acceptance_service.accept_answer(first.id, asker)

        # Act
        await acceptance_service.accept_answer(second.id, asker)

        # Assert
        assert not (await answer_repo.find_by_id(first.id)).is_accepted
        assert (await answer_repo.find_by_id(second.id)).is_accepted
        assert (await question_repo.find_by_id(question.id)).accepted_answer == second.id
        accepted = [
            a for a in await answer_repo.find_by_question(question.id) if a.is_accepted
        ]
        assert len(accepted) == 1

    @pytest.mark.asyncio
    async def test_reaccepting_same_answer_grants_bonus_again(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        asker, _, (answer, _) = await seed_question_with_answers(unit_env)

        await acceptance_service.accept_answer(answer.id, asker)
        await acceptance_service.accept_answer(answer.id, asker)

        assert (await user_repo.find_by_id(answer.user_id)).reputation == 30

    @pytest.mark.asyncio
    async def test_accepting_own_answer_skips_notification(self, unit_env):
        """No notification when the asker accepts their own answer."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        notification_repo = await unit_env.get(NotificationRepository)
        user_repo = await unit_env.get(UserRepository)
        asker = await create_user(unit_env, "asker")
        question = await question_service.create_question(asker.id, "Q", "D", [])
        answer = await answer_service.create_answer(question.id, asker.id, "Self")

        # Act
        await acceptance_service.accept_answer(answer.id, asker)

        # Assert
        assert await notification_repo.find_by_recipient(asker.id) == []
        assert (await user_repo.find_by_id(asker.id)).reputation == 15

    @pytest.mark.asyncio
    async def test_only_question_owner_may_accept(self, unit_env):
        """Other users, admins included, are rejected and nothing changes."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        answer_repo = await unit_env.get(AnswerRepository)
        _, _, (answer, _) = await seed_question_with_answers(unit_env)
        admin = await create_user(unit_env, "admin", role=UserRole.ADMIN)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await acceptance_service.accept_answer(answer.id, admin)
        assert not (await answer_repo.find_by_id(answer.id)).is_accepted

    @pytest.mark.asyncio
    async def test_missing_answer_raises(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        asker = await create_user(unit_env, "asker")

        with pytest.raises(NotFoundError):
            await acceptance_service.accept_answer(AnswerId(uuid4()), asker)
