"""Acceptance domain service.

A question has at most one accepted answer. Accepting a different answer
demotes the previous one; the answer owner earns the acceptance bonus and
is notified.
"""

import logfire

from stackit.domain.error import NotFoundError
from stackit.domain.model import Answer, User
from stackit.domain.policy import Action, ensure_can_mutate
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.value import AnswerId, NotificationType

from .base import Service
from .notification_service import NotificationService
from .reputation_service import ReputationService


class AcceptanceService(Service):
    """Domain service for accepting answers."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        reputation_service: ReputationService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize acceptance service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            reputation_service: Reputation domain service
            notification_service: Notification domain service
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.reputation_service = reputation_service
        self.notification_service = notification_service

    async def accept_answer(self, answer_id: AnswerId, caller: User) -> Answer:
        """Mark an answer as the accepted answer of its question.

        Args:
            answer_id: Answer to accept
            caller: Authenticated user, must own the question

        Returns:
            The accepted answer

        Raises:
            NotFoundError: If the answer or its question does not exist
            NotAuthorizedError: If the caller does not own the question
        """
        with logfire.span(
            "acceptance_service.accept_answer",
            answer_id=str(answer_id),
            caller_id=str(caller.id),
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Accepting non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            question = await self.question_repository.find_by_id(answer.question_id)
            if not question:
                logfire.warn(
                    "Accepting answer of non-existent question",
                    answer_id=str(answer_id),
                    question_id=str(answer.question_id),
                )
                raise NotFoundError("Question", str(answer.question_id))

            ensure_can_mutate(
                caller, question.user_id, Action.ACCEPT, "question", str(question.id)
            )

            previous_id = question.accepted_answer
            if previous_id is not None and previous_id != answer.id:
                previous = await self.answer_repository.find_by_id(previous_id)
                if previous:
                    await self.answer_repository.set_accepted(previous_id, False)
                    logfire.info(
                        "Previously accepted answer demoted",
                        answer_id=str(previous_id),
                        question_id=str(question.id),
                    )

            await self.answer_repository.set_accepted(answer.id, True)
            await self.question_repository.set_accepted_answer(question.id, answer.id)

            await self.reputation_service.reward_acceptance(answer.user_id)

            await self.notification_service.emit(
                NotificationType.ACCEPT,
                sender=caller,
                recipient_id=answer.user_id,
                question=question,
                answer_id=answer.id,
            )

            logfire.info(
                "Answer accepted",
                answer_id=str(answer.id),
                question_id=str(question.id),
            )
            return answer.model_copy(update={"is_accepted": True})
