"""Question aggregate root.

Questions carry their own vote ledger, a view counter and an optional
reference to the single accepted answer.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from stackit.domain.model.vote import Votable
from stackit.domain.value import AnswerId, QuestionId, UserId


class Question(Votable):
    """Question aggregate root."""

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    user_id: UserId
    views: int = Field(default=0, ge=0)
    accepted_answer: Optional[AnswerId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: list[str]) -> list[str]:
        """Strip tags, drop blanks and duplicates while keeping order."""
        seen: dict[str, None] = {}
        for tag in v:
            tag = tag.strip()
            if tag:
                seen.setdefault(tag, None)
        return list(seen)
