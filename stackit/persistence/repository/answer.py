"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Answer
from stackit.domain.repository import AnswerRepository, AnswerSortOrder
from stackit.domain.value import AnswerId, QuestionId
from stackit.persistence.mappers import answer_to_dict, row_to_answer
from stackit.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_answer(dict(row)) if row else None

    async def find_by_id_for_update(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer and lock its row (SELECT ... FOR UPDATE)."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.id == answer_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_answer(dict(row)) if row else None

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.RANKED,
    ) -> List[Answer]:
        """Find all answers to a question in the requested order."""
        with logfire.span(
            "answer_repository.find_by_question",
            question_id=str(question_id),
            sort=sort.value,
        ):
            stmt = select(answers_table).where(
                answers_table.c.question_id == question_id
            )

            if sort == AnswerSortOrder.RANKED:
                stmt = stmt.order_by(
                    desc(answers_table.c.is_accepted),
                    desc(answers_table.c.vote_count),
                    desc(answers_table.c.created_at),
                )
            elif sort == AnswerSortOrder.TOP_VOTED:
                stmt = stmt.order_by(desc(answers_table.c.vote_count))

            result = await self.session.execute(stmt)
            answers = [row_to_answer(dict(row)) for row in result.mappings().all()]
            logfire.info("Found answers", count=len(answers))
            return answers

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        with logfire.span("answer_repository.save", answer_id=str(answer.id)):
            existing = await self.find_by_id(answer.id)

            answer_dict = answer_to_dict(answer)

            if existing:
                stmt = (
                    answers_table.update()
                    .where(answers_table.c.id == answer.id)
                    .values(**answer_dict)
                )
            else:
                stmt = answers_table.insert().values(**answer_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return answer

    async def save_votes(self, answer: Answer) -> None:
        """Persist the vote ledger columns only."""
        stmt = (
            answers_table.update()
            .where(answers_table.c.id == answer.id)
            .values(
                upvotes=answer.upvotes,
                downvotes=answer.downvotes,
                vote_count=answer.vote_count,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_accepted(self, answer_id: AnswerId, is_accepted: bool) -> None:
        """Set the accepted flag of an answer."""
        stmt = (
            answers_table.update()
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=is_accepted)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer (hard delete)."""
        stmt = answers_table.delete().where(answers_table.c.id == answer_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question."""
        stmt = answers_table.delete().where(answers_table.c.question_id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
