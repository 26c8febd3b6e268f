"""Read-side projection of domain entities into response views.

Responses embed a summary of every user they reference. The builder
collects all referenced user IDs from a batch of entities and resolves
them with a single lookup instead of one query per reference.
"""

from datetime import datetime
from typing import Iterable, Optional, Sequence

from pydantic import BaseModel

from stackit.domain.model import Answer, Notification, Question, User
from stackit.domain.service import QuestionService, UserService
from stackit.domain.value import NotificationType, UserId


class UserSummary(BaseModel):
    """Public summary of a user embedded in other resources."""

    id: str
    username: str
    avatar: str | None = None


class AnswerView(BaseModel):
    """Answer as returned by the API."""

    id: str
    content: str
    user: UserSummary | None
    question_id: str
    upvotes: list[UserSummary]
    downvotes: list[UserSummary]
    vote_count: int
    is_accepted: bool
    created_at: datetime
    updated_at: datetime


class QuestionView(BaseModel):
    """Question as returned by the API."""

    id: str
    title: str
    description: str
    tags: list[str]
    user: UserSummary | None
    views: int
    upvotes: list[UserSummary]
    downvotes: list[UserSummary]
    vote_count: int
    accepted_answer: str | None
    created_at: datetime
    updated_at: datetime


class QuestionDetailView(QuestionView):
    """Question with its answers embedded."""

    answers: list[AnswerView]


class QuestionRef(BaseModel):
    """Question reference embedded in a notification."""

    id: str
    title: str


class NotificationView(BaseModel):
    """Notification as returned by the API."""

    id: str
    type: NotificationType
    message: str
    read: bool
    sender: UserSummary | None
    question: QuestionRef | None
    answer_id: str | None
    created_at: datetime


def summarize(user: Optional[User]) -> UserSummary | None:
    if user is None:
        return None
    return UserSummary(id=str(user.id), username=user.username.root, avatar=user.avatar)


def voters(voter_ids: Iterable[UserId], users: dict[UserId, User]) -> list[UserSummary]:
    """Summaries of the voters in a ledger list; deleted users are left out."""
    return [summarize(users[v]) for v in voter_ids if v in users]


def referenced_users(entity: Question | Answer) -> list[UserId]:
    return [entity.user_id, *entity.upvotes, *entity.downvotes]


class ViewBuilder:
    """Builds API views with user summaries resolved in one batch."""

    def __init__(
        self, user_service: UserService, question_service: QuestionService
    ) -> None:
        self.user_service = user_service
        self.question_service = question_service

    async def _users(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        return await self.user_service.get_users_by_ids(user_ids)

    @staticmethod
    def _answer_view(answer: Answer, users: dict[UserId, User]) -> AnswerView:
        return AnswerView(
            id=str(answer.id),
            content=answer.content,
            user=summarize(users.get(answer.user_id)),
            question_id=str(answer.question_id),
            upvotes=voters(answer.upvotes, users),
            downvotes=voters(answer.downvotes, users),
            vote_count=answer.vote_count,
            is_accepted=answer.is_accepted,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
        )

    @staticmethod
    def _question_fields(question: Question, users: dict[UserId, User]) -> dict:
        return dict(
            id=str(question.id),
            title=question.title,
            description=question.description,
            tags=list(question.tags),
            user=summarize(users.get(question.user_id)),
            views=question.views,
            upvotes=voters(question.upvotes, users),
            downvotes=voters(question.downvotes, users),
            vote_count=question.vote_count,
            accepted_answer=(
                str(question.accepted_answer) if question.accepted_answer else None
            ),
            created_at=question.created_at,
            updated_at=question.updated_at,
        )

    async def questions(self, questions: Sequence[Question]) -> list[QuestionView]:
        """Project a page of questions."""
        users = await self._users(
            user_id for q in questions for user_id in referenced_users(q)
        )
        return [QuestionView(**self._question_fields(q, users)) for q in questions]

    async def question(self, question: Question) -> QuestionView:
        """Project a single question."""
        return (await self.questions([question]))[0]

    async def question_detail(
        self, question: Question, answers: Sequence[Answer]
    ) -> QuestionDetailView:
        """Project a question together with its answers."""
        users = await self._users(
            [
                *referenced_users(question),
                *(user_id for a in answers for user_id in referenced_users(a)),
            ]
        )
        return QuestionDetailView(
            **self._question_fields(question, users),
            answers=[self._answer_view(answer, users) for answer in answers],
        )

    async def answers(self, answers: Sequence[Answer]) -> list[AnswerView]:
        """Project a list of answers."""
        users = await self._users(
            user_id for a in answers for user_id in referenced_users(a)
        )
        return [self._answer_view(answer, users) for answer in answers]

    async def answer(self, answer: Answer) -> AnswerView:
        """Project a single answer."""
        return (await self.answers([answer]))[0]

    async def notifications(
        self, notifications: Sequence[Notification]
    ) -> list[NotificationView]:
        """Project notifications with sender summary and question title."""
        users = await self._users(n.sender_id for n in notifications)
        questions = await self.question_service.get_questions_by_ids(
            n.question_id for n in notifications if n.question_id is not None
        )

        views = []
        for notification in notifications:
            question = (
                questions.get(notification.question_id)
                if notification.question_id
                else None
            )
            views.append(
                NotificationView(
                    id=str(notification.id),
                    type=notification.type,
                    message=notification.message,
                    read=notification.read,
                    sender=summarize(users.get(notification.sender_id)),
                    question=(
                        QuestionRef(id=str(question.id), title=question.title)
                        if question
                        else None
                    ),
                    answer_id=(
                        str(notification.answer_id) if notification.answer_id else None
                    ),
                    created_at=notification.created_at,
                )
            )
        return views
