"""Unit tests for ListQuestionsUseCase."""

import pytest

from stackit.application.usecase.question import (
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from stackit.domain.service import QuestionService
from tests.harness import create_env_fixture, create_user

unit_env = create_env_fixture()


class TestListQuestionsUseCase:
    """Tests for ListQuestionsUseCase."""

    @pytest.mark.asyncio
    async def test_page_count_rounds_up(self, unit_env):
        """15 questions at 10 per page make 2 pages."""
        # Arrange
        use_case = await unit_env.get(ListQuestionsUseCase)
        question_service = await unit_env.get(QuestionService)
        owner = await create_user(unit_env, "owner")
        for i in range(15):
            await question_service.create_question(owner.id, f"Q{i}", "D", [])

        # Act
        response = await use_case.execute(ListQuestionsRequest(page=2))

        # Assert
        assert response.page == 2
        assert response.pages == 2
        assert len(response.questions) == 5

    @pytest.mark.asyncio
    async def test_no_questions_means_zero_pages(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)

        response = await use_case.execute(ListQuestionsRequest())

        assert response.questions == []
        assert response.page == 1
        assert response.pages == 0

    @pytest.mark.asyncio
    async def test_blank_filters_are_ignored(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        question_service = await unit_env.get(QuestionService)
        owner = await create_user(unit_env, "owner")
        await question_service.create_question(owner.id, "Anything", "D", ["x"])

        response = await use_case.execute(ListQuestionsRequest(keyword="  ", tag=""))

        assert len(response.questions) == 1

    @pytest.mark.asyncio
    async def test_views_embed_author_summary(self, unit_env):
        """Each question carries its author's id and username."""
        use_case = await unit_env.get(ListQuestionsUseCase)
        question_service = await unit_env.get(QuestionService)
        owner = await create_user(unit_env, "owner")
        await question_service.create_question(owner.id, "Q", "D", [])

        response = await use_case.execute(ListQuestionsRequest())

        author = response.questions[0].user
        assert author.id == str(owner.id)
        assert author.username == "owner"

    def test_page_must_be_positive(self):
        with pytest.raises(ValueError):
            ListQuestionsRequest(page=0)
