"""Answer repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from stackit.domain.model.answer import Answer
from stackit.domain.value import AnswerId, QuestionId


class AnswerSortOrder(str, Enum):
    """Sort order for answer listings."""

    RANKED = "ranked"  # Accepted first, then vote_count DESC, then created_at DESC
    TOP_VOTED = "top_voted"  # vote_count DESC


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Defines the contract for answer persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer and lock it until the current transaction ends.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.RANKED,
    ) -> List[Answer]:
        """Find all answers to a question.

        Args:
            question_id: The question ID
            sort: Sort order

        Returns:
            List of answers in the requested order
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def save_votes(self, answer: Answer) -> None:
        """Persist only the vote ledger columns of an answer.

        Args:
            answer: Answer carrying the new upvotes/downvotes/vote_count
        """
        pass

    @abstractmethod
    async def set_accepted(self, answer_id: AnswerId, is_accepted: bool) -> None:
        """Set the accepted flag of an answer.

        Args:
            answer_id: The answer's unique identifier
            is_accepted: New flag value
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer.

        Args:
            answer_id: The answer ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question.

        Args:
            question_id: The question ID

        Returns:
            Number of answers deleted
        """
        pass
