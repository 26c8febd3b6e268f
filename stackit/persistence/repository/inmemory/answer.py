"""In-memory answer repository for testing."""

from typing import List, Optional

from stackit.domain.model.answer import Answer
from stackit.domain.repository.answer import AnswerRepository, AnswerSortOrder
from stackit.domain.value import AnswerId, QuestionId

from .store import InMemoryStore


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _answers(self) -> dict[AnswerId, Answer]:
        return self._store.answers

    def _null_notification_refs(self, answer_id: AnswerId) -> None:
        for nid, notification in list(self._store.notifications.items()):
            if notification.answer_id == answer_id:
                self._store.notifications[nid] = notification.model_copy(
                    update={"answer_id": None}
                )

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_id_for_update(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID (no locking needed in memory)."""
        return self._answers.get(answer_id)

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.RANKED,
    ) -> List[Answer]:
        """Find all answers to a question in the requested order."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]

        if sort == AnswerSortOrder.RANKED:
            answers.sort(
                key=lambda a: (a.is_accepted, a.vote_count, a.created_at),
                reverse=True,
            )
        elif sort == AnswerSortOrder.TOP_VOTED:
            answers.sort(key=lambda a: a.vote_count, reverse=True)

        return answers

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        self._answers[answer.id] = answer
        return answer

    async def save_votes(self, answer: Answer) -> None:
        """Persist the vote ledger of an answer."""
        current = self._answers.get(answer.id)
        if current:
            self._answers[answer.id] = current.model_copy(
                update={
                    "upvotes": list(answer.upvotes),
                    "downvotes": list(answer.downvotes),
                    "vote_count": answer.vote_count,
                }
            )

    async def set_accepted(self, answer_id: AnswerId, is_accepted: bool) -> None:
        """Set the accepted flag of an answer."""
        current = self._answers.get(answer_id)
        if current:
            self._answers[answer_id] = current.model_copy(
                update={"is_accepted": is_accepted}
            )

    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer."""
        if self._answers.pop(answer_id, None):
            self._null_notification_refs(answer_id)

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question."""
        doomed = [a.id for a in self._answers.values() if a.question_id == question_id]
        for answer_id in doomed:
            await self.delete(answer_id)
        return len(doomed)
