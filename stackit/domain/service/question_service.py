"""Question domain service."""

from datetime import datetime
from typing import Iterable, Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as ModelValidationError

from stackit.domain.error import NotFoundError
from stackit.domain.model import Question
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.value import QuestionId, UserId

from .base import Service, validation_error


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository (for cascading deletes)
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def create_question(
        self,
        user_id: UserId,
        title: str,
        description: str,
        tags: list[str],
    ) -> Question:
        """Create and persist a new question.

        Args:
            user_id: Owner of the question
            title: Question title
            description: Question body
            tags: Tags (normalized by the model)

        Returns:
            Saved question

        Raises:
            ValidationError: If the question breaks a content rule
        """
        with logfire.span(
            "question_service.create_question", user_id=str(user_id), title=title
        ):
            now = datetime.now()
            try:
                question = Question(
                    id=QuestionId(uuid4()),
                    title=title,
                    description=description,
                    tags=tags,
                    user_id=user_id,
                    created_at=now,
                    updated_at=now,
                )
            except ModelValidationError as e:
                raise validation_error("Question", e) from e
            saved = await self.question_repository.save(question)
            logfire.info(
                "Question created", question_id=str(saved.id), user_id=str(user_id)
            )
            return saved

    async def get_question_by_id(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Args:
            question_id: Question ID

        Returns:
            Question

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "question_service.get_question_by_id", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def get_questions_by_ids(
        self, question_ids: Iterable[QuestionId]
    ) -> dict[QuestionId, Question]:
        """Resolve a batch of question IDs; missing ones are left out."""
        unique_ids = set(question_ids)
        if not unique_ids:
            return {}
        questions = await self.question_repository.find_by_ids(unique_ids)
        return {question.id: question for question in questions}

    async def record_view(self, question_id: QuestionId) -> Question:
        """Count a view and return the question with the new counter.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("question_service.record_view", question_id=str(question_id)):
            await self.get_question_by_id(question_id)
            await self.question_repository.increment_views(question_id)
            return await self.get_question_by_id(question_id)

    async def list_questions(
        self,
        keyword: Optional[str],
        tag: Optional[str],
        page: int,
        page_size: int,
    ) -> tuple[list[Question], int]:
        """List one page of questions, newest first.

        Args:
            keyword: Case-insensitive title substring filter
            tag: Exact tag filter
            page: 1-based page number
            page_size: Questions per page

        Returns:
            Tuple of (questions on the page, total matching questions)
        """
        with logfire.span(
            "question_service.list_questions",
            keyword=keyword,
            tag=tag,
            page=page,
        ):
            offset = (page - 1) * page_size
            questions = await self.question_repository.find_all(
                keyword=keyword, tag=tag, limit=page_size, offset=offset
            )
            total = await self.question_repository.count(keyword=keyword, tag=tag)
            logfire.info(
                "Questions listed", page=page, returned=len(questions), total=total
            )
            return questions, total

    async def update_question(
        self,
        question: Question,
        title: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> Question:
        """Apply a partial update to a question.

        Fields left as None keep their current value.

        Args:
            question: Current question
            title: New title
            description: New description
            tags: New tags

        Returns:
            Saved question

        Raises:
            ValidationError: If the update breaks a content rule
        """
        with logfire.span(
            "question_service.update_question", question_id=str(question.id)
        ):
            changes: dict = {"updated_at": datetime.now()}
            if title is not None:
                changes["title"] = title
            if description is not None:
                changes["description"] = description
            if tags is not None:
                changes["tags"] = tags

            # Re-validate so title/tag rules still hold after the update
            try:
                updated = Question.model_validate(
                    {**question.model_dump(), **changes}
                )
            except ModelValidationError as e:
                raise validation_error("Question", e) from e
            saved = await self.question_repository.save(updated)
            logfire.info(
                "Question updated",
                question_id=str(saved.id),
                fields=sorted(k for k in changes if k != "updated_at"),
            )
            return saved

    async def delete_question(self, question_id: QuestionId) -> None:
        """Delete a question together with its answers.

        Args:
            question_id: Question ID
        """
        with logfire.span(
            "question_service.delete_question", question_id=str(question_id)
        ):
            removed = await self.answer_repository.delete_by_question(question_id)
            await self.question_repository.delete(question_id)
            logfire.info(
                "Question deleted", question_id=str(question_id), answers_removed=removed
            )
