"""PostgreSQL implementation of Question repository."""

from typing import Iterable, List, Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Question
from stackit.domain.repository import QuestionRepository
from stackit.domain.value import AnswerId, QuestionId
from stackit.persistence.mappers import question_to_dict, row_to_question
from stackit.persistence.tables import questions_table


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _filtered(self, stmt, keyword: Optional[str], tag: Optional[str]):
        if keyword:
            stmt = stmt.where(
                questions_table.c.title.ilike(
                    f"%{escape_like(keyword)}%", escape="\\"
                )
            )
        if tag:
            # Array containment, served by the GIN index on tags
            stmt = stmt.where(questions_table.c.tags.contains([tag]))
        return stmt

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_question(dict(row)) if row else None

    async def find_by_ids(self, question_ids: Iterable[QuestionId]) -> List[Question]:
        """Find all questions whose ID is in ``question_ids``."""
        ids = list(set(question_ids))
        if not ids:
            return []

        stmt = select(questions_table).where(questions_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        return [row_to_question(dict(row)) for row in result.mappings().all()]

    async def find_by_id_for_update(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        """Find a question and lock its row (SELECT ... FOR UPDATE)."""
        with logfire.span(
            "question_repository.find_by_id_for_update", question_id=str(question_id)
        ):
            stmt = (
                select(questions_table)
                .where(questions_table.c.id == question_id)
                .with_for_update()
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_question(dict(row)) if row else None

    async def find_all(
        self,
        keyword: Optional[str] = None,
        tag: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions newest first with filtering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            keyword=keyword,
            tag=tag,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filtered(select(questions_table), keyword, tag)
            stmt = (
                stmt.order_by(desc(questions_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            questions = [row_to_question(dict(row)) for row in result.mappings().all()]

            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(
        self,
        keyword: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> int:
        """Count questions matching the given filters."""
        with logfire.span("question_repository.count", keyword=keyword, tag=tag):
            stmt = self._filtered(
                select(func.count()).select_from(questions_table), keyword, tag
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        with logfire.span(
            "question_repository.save",
            question_id=str(question.id),
            title=question.title,
            tags=question.tags,
        ):
            existing = await self.find_by_id(question.id)

            question_dict = question_to_dict(question)

            if existing:
                logfire.info("Updating existing question", question_id=str(question.id))
                stmt = (
                    questions_table.update()
                    .where(questions_table.c.id == question.id)
                    .values(**question_dict)
                )
            else:
                logfire.info("Inserting new question", question_id=str(question.id))
                stmt = questions_table.insert().values(**question_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return question

    async def save_votes(self, question: Question) -> None:
        """Persist the vote ledger columns only."""
        stmt = (
            questions_table.update()
            .where(questions_table.c.id == question.id)
            .values(
                upvotes=question.upvotes,
                downvotes=question.downvotes,
                vote_count=question.vote_count,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter."""
        stmt = (
            questions_table.update()
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Set or clear the accepted answer reference."""
        stmt = (
            questions_table.update()
            .where(questions_table.c.id == question_id)
            .values(accepted_answer=answer_id)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question (hard delete; answers cascade)."""
        stmt = questions_table.delete().where(questions_table.c.id == question_id)
        await self.session.execute(stmt)
        await self.session.flush()
