"""In-memory question repository for testing."""

from typing import Iterable, List, Optional

from stackit.domain.model.question import Question
from stackit.domain.repository.question import QuestionRepository
from stackit.domain.value import AnswerId, QuestionId

from .store import InMemoryStore


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _questions(self) -> dict[QuestionId, Question]:
        return self._store.questions

    def _matching(self, keyword: Optional[str], tag: Optional[str]) -> list[Question]:
        questions = list(self._questions.values())
        if keyword:
            needle = keyword.lower()
            questions = [q for q in questions if needle in q.title.lower()]
        if tag:
            questions = [q for q in questions if tag in q.tags]
        return questions

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_by_ids(self, question_ids: Iterable[QuestionId]) -> List[Question]:
        """Find all questions whose ID is in ``question_ids``."""
        return [
            self._questions[qid] for qid in set(question_ids) if qid in self._questions
        ]

    async def find_by_id_for_update(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        """Find a question by ID (no locking needed in memory)."""
        return self._questions.get(question_id)

    async def find_all(
        self,
        keyword: Optional[str] = None,
        tag: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions newest first with filtering and pagination."""
        questions = self._matching(keyword, tag)
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[offset : offset + limit]

    async def count(
        self,
        keyword: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> int:
        """Count questions matching the given filters."""
        return len(self._matching(keyword, tag))

    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        self._questions[question.id] = question
        return question

    async def save_votes(self, question: Question) -> None:
        """Persist the vote ledger of a question."""
        current = self._questions.get(question.id)
        if current:
            self._questions[question.id] = current.model_copy(
                update={
                    "upvotes": list(question.upvotes),
                    "downvotes": list(question.downvotes),
                    "vote_count": question.vote_count,
                }
            )

    async def increment_views(self, question_id: QuestionId) -> None:
        """Increment the view counter."""
        current = self._questions.get(question_id)
        if current:
            self._questions[question_id] = current.model_copy(
                update={"views": current.views + 1}
            )

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Set or clear the accepted answer reference."""
        current = self._questions.get(question_id)
        if current:
            self._questions[question_id] = current.model_copy(
                update={"accepted_answer": answer_id}
            )

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question and null notification references to it."""
        self._questions.pop(question_id, None)
        for nid, notification in list(self._store.notifications.items()):
            if notification.question_id == question_id:
                self._store.notifications[nid] = notification.model_copy(
                    update={"question_id": None}
                )
