"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from stackit.domain.model.question import Question
from stackit.domain.value import AnswerId, QuestionId


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, question_ids: Iterable[QuestionId]) -> List[Question]:
        """Find every question whose ID is in ``question_ids``.

        Missing IDs are skipped.
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        """Find a question and lock it until the current transaction ends.

        Used before read-modify-write cycles on the vote ledger so concurrent
        voters cannot overwrite each other.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        keyword: Optional[str] = None,
        tag: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions newest first with filtering and pagination.

        Args:
            keyword: Case-insensitive substring the title must contain
            tag: Tag the question must carry
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        keyword: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> int:
        """Count questions matching the given filters.

        Args:
            keyword: Case-insensitive substring the title must contain
            tag: Tag the question must carry

        Returns:
            Total number of questions matching the criteria
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def save_votes(self, question: Question) -> None:
        """Persist only the vote ledger columns of a question.

        Args:
            question: Question carrying the new upvotes/downvotes/vote_count
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter by 1.

        Args:
            question_id: The question's unique identifier
        """
        pass

    @abstractmethod
    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Set or clear the accepted answer reference.

        Args:
            question_id: The question's unique identifier
            answer_id: Accepted answer, or None to clear
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question.

        Args:
            question_id: The question ID to delete
        """
        pass
