"""Answer entity.

Answers belong to exactly one question. At most one answer per question
is accepted at any time.
"""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.vote import Votable
from stackit.domain.value import AnswerId, QuestionId, UserId


class Answer(Votable):
    """Answer entity."""

    id: AnswerId
    content: str = Field(min_length=1)
    user_id: UserId
    question_id: QuestionId
    is_accepted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
