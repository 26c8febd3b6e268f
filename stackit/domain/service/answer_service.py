"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as ModelValidationError

from stackit.domain.error import NotFoundError, ReferentialError
from stackit.domain.model import Answer
from stackit.domain.repository import (
    AnswerRepository,
    AnswerSortOrder,
    QuestionRepository,
)
from stackit.domain.value import AnswerId, QuestionId, UserId

from .base import Service, validation_error


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository

    async def create_answer(
        self, question_id: QuestionId, user_id: UserId, content: str
    ) -> Answer:
        """Create an answer on an existing question.

        Args:
            question_id: Question being answered
            user_id: Author of the answer
            content: Answer body

        Returns:
            Saved answer

        Raises:
            ReferentialError: If the question does not exist
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn(
                    "Answer on non-existent question", question_id=str(question_id)
                )
                raise ReferentialError("Question", str(question_id))

            now = datetime.now()
            try:
                answer = Answer(
                    id=AnswerId(uuid4()),
                    content=content,
                    user_id=user_id,
                    question_id=question_id,
                    created_at=now,
                    updated_at=now,
                )
            except ModelValidationError as e:
                raise validation_error("Answer", e) from e
            saved = await self.answer_repository.save(answer)
            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question_id)
            )
            return saved

    async def get_answer_by_id(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span("answer_service.get_answer_by_id", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))
            return answer

    async def list_answers(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.RANKED,
    ) -> list[Answer]:
        """List the answers to a question.

        Args:
            question_id: Question ID
            sort: Ordering of the result

        Returns:
            Answers in the requested order
        """
        with logfire.span(
            "answer_service.list_answers",
            question_id=str(question_id),
            sort=sort.value,
        ):
            return await self.answer_repository.find_by_question(question_id, sort=sort)

    async def update_content(self, answer: Answer, content: str) -> Answer:
        """Replace the content of an answer.

        Args:
            answer: Current answer
            content: New content

        Returns:
            Saved answer
        """
        with logfire.span("answer_service.update_content", answer_id=str(answer.id)):
            try:
                updated = Answer.model_validate(
                    {
                        **answer.model_dump(),
                        "content": content,
                        "updated_at": datetime.now(),
                    }
                )
            except ModelValidationError as e:
                raise validation_error("Answer", e) from e
            saved = await self.answer_repository.save(updated)
            logfire.info("Answer updated", answer_id=str(saved.id))
            return saved

    async def delete_answer(self, answer: Answer) -> None:
        """Delete an answer.

        If it was the accepted answer, the question loses its accepted answer.

        Args:
            answer: Answer to delete
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
        ):
            question = await self.question_repository.find_by_id(answer.question_id)
            if question and question.accepted_answer == answer.id:
                await self.question_repository.set_accepted_answer(question.id, None)
                logfire.info(
                    "Accepted answer cleared",
                    question_id=str(question.id),
                    answer_id=str(answer.id),
                )

            await self.answer_repository.delete(answer.id)
            logfire.info("Answer deleted", answer_id=str(answer.id))
