"""Unit tests for QuestionService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.model import Question
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.service import AnswerService, QuestionService
from stackit.domain.value import QuestionId
from tests.harness import create_env_fixture, create_user

unit_env = create_env_fixture()


class TestListQuestions:
    """Tests for list_questions."""

    async def _seed(self, env, titles_and_tags):
        repo = await env.get(QuestionRepository)
        owner = await create_user(env, "owner")
        start = datetime(2025, 1, 1)
        for i, (title, tags) in enumerate(titles_and_tags):
            await repo.save(
                Question(
                    id=QuestionId(uuid4()),
                    title=title,
                    description="body",
                    tags=tags,
                    user_id=owner.id,
                    created_at=start + timedelta(minutes=i),
                    updated_at=start + timedelta(minutes=i),
                )
            )

    @pytest.mark.asyncio
    async def test_newest_first_with_total(self, unit_env):
        """Pages are cut newest first; the total counts every match."""
        # Arrange
        service = await unit_env.get(QuestionService)
        await self._seed(unit_env, [(f"Question {i}", []) for i in range(15)])

        # Act
        page_one, total = await service.list_questions(None, None, 1, 10)
        page_two, _ = await service.list_questions(None, None, 2, 10)

        # Assert
        assert total == 15
        assert len(page_one) == 10
        assert len(page_two) == 5
        assert page_one[0].title == "Question 14"
        assert page_two[-1].title == "Question 0"

    @pytest.mark.asyncio
    async def test_keyword_is_case_insensitive_title_match(self, unit_env):
        service = await unit_env.get(QuestionService)
        await self._seed(
            unit_env,
            [("Python decorators", []), ("Rust lifetimes", []), ("PYTHON async", [])],
        )

        questions, total = await service.list_questions("python", None, 1, 10)

        assert total == 2
        assert {q.title for q in questions} == {"Python decorators", "PYTHON async"}

    @pytest.mark.asyncio
    async def test_tag_filter_matches_exact_tag(self, unit_env):
        service = await unit_env.get(QuestionService)
        await self._seed(
            unit_env,
            [("A", ["python"]), ("B", ["python-3"]), ("C", ["go", "python"])],
        )

        questions, total = await service.list_questions(None, "python", 1, 10)

        assert total == 2
        assert {q.title for q in questions} == {"A", "C"}


class TestQuestionLifecycle:
    """Create, view, update and delete."""

    @pytest.mark.asyncio
    async def test_record_view_increments_counter(self, unit_env):
        service = await unit_env.get(QuestionService)
        owner = await create_user(unit_env, "owner")
        question = await service.create_question(owner.id, "Q", "D", [])

        await service.record_view(question.id)
        viewed = await service.record_view(question.id)

        assert viewed.views == 2

    @pytest.mark.asyncio
    async def test_record_view_of_missing_question(self, unit_env):
        service = await unit_env.get(QuestionService)

        with pytest.raises(NotFoundError):
            await service.record_view(QuestionId(uuid4()))

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, unit_env):
        """Only the supplied fields change."""
        # Arrange
        service = await unit_env.get(QuestionService)
        owner = await create_user(unit_env, "owner")
        question = await service.create_question(
            owner.id, "Old title", "Old body", ["a"]
        )

        # Act
        updated = await service.update_question(question, title="New title")

        # Assert
        assert updated.title == "New title"
        assert updated.description == "Old body"
        assert updated.tags == ["a"]
        assert updated.updated_at >= question.updated_at

    @pytest.mark.asyncio
    async def test_update_rejects_blank_title(self, unit_env):
        service = await unit_env.get(QuestionService)
        owner = await create_user(unit_env, "owner")
        question = await service.create_question(owner.id, "Title", "Body", [])

        with pytest.raises(ValidationError) as exc_info:
            await service.update_question(question, title="")
        assert exc_info.value.resource == "Question"
        assert str(exc_info.value).startswith("title: ")

    @pytest.mark.asyncio
    async def test_create_rejects_overlong_title(self, unit_env):
        service = await unit_env.get(QuestionService)
        owner = await create_user(unit_env, "owner")

        with pytest.raises(ValidationError):
            await service.create_question(owner.id, "x" * 301, "Body", [])

    @pytest.mark.asyncio
    async def test_delete_removes_answers(self, unit_env):
        """Deleting a question deletes its answers."""
        # Arrange
        service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        owner = await create_user(unit_env, "owner")
        question = await service.create_question(owner.id, "Q", "D", [])
        answer = await answer_service.create_answer(question.id, owner.id, "A")

        # Act
        await service.delete_question(question.id)

        # Assert
        assert await question_repo.find_by_id(question.id) is None
        assert await answer_repo.find_by_id(answer.id) is None
