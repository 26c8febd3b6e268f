"""Unit tests for question edit and delete use cases."""

import pytest

from stackit.application.usecase.question import (
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from stackit.domain.error import NotAuthorizedError
from stackit.domain.repository import QuestionRepository
from stackit.domain.service import QuestionService
from stackit.domain.value import UserRole
from tests.harness import create_env_fixture, create_user

unit_env = create_env_fixture()


class TestUpdateQuestionUseCase:
    """Tests for UpdateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_owner_updates_tags(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateQuestionUseCase)
        question_service = await unit_env.get(QuestionService)
        owner = await create_user(unit_env, "owner")
        question = await question_service.create_question(owner.id, "T", "D", ["a"])

        # Act
        view = await use_case.execute(
            UpdateQuestionRequest(
                question_id=str(question.id),
                user_id=str(owner.id),
                tags=["b", "c"],
            )
        )

        # Assert
        assert view.tags == ["b", "c"]
        assert view.title == "T"

    @pytest.mark.asyncio
    async def test_admin_cannot_edit_others_question(self, unit_env):
        """Admins moderate by deleting, not by editing."""
        use_case = await unit_env.get(UpdateQuestionUseCase)
        question_service = await unit_env.get(QuestionService)
        owner = await create_user(unit_env, "owner")
        admin = await create_user(unit_env, "admin", role=UserRole.ADMIN)
        question = await question_service.create_question(owner.id, "T", "D", [])

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateQuestionRequest(
                    question_id=str(question.id), user_id=str(admin.id), title="X"
                )
            )


class TestDeleteQuestionUseCase:
    """Tests for DeleteQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_admin_can_delete_others_question(self, unit_env):
        use_case = await unit_env.get(DeleteQuestionUseCase)
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        owner = await create_user(unit_env, "owner")
        admin = await create_user(unit_env, "admin", role=UserRole.ADMIN)
        question = await question_service.create_question(owner.id, "T", "D", [])

        response = await use_case.execute(
            DeleteQuestionRequest(question_id=str(question.id), user_id=str(admin.id))
        )

        assert response.message == "Question removed"
        assert await question_repo.find_by_id(question.id) is None

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        use_case = await unit_env.get(DeleteQuestionUseCase)
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        owner = await create_user(unit_env, "owner")
        stranger = await create_user(unit_env, "stranger")
        question = await question_service.create_question(owner.id, "T", "D", [])

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteQuestionRequest(
                    question_id=str(question.id), user_id=str(stranger.id)
                )
            )
        assert await question_repo.find_by_id(question.id) is not None
