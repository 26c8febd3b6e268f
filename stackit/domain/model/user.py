"""User aggregate root.

Users own questions and answers and accumulate reputation when the
community votes on or accepts their contributions.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import UserId, UserRole
from stackit.domain.value.types import Username


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    avatar: Optional[str] = None
    role: UserRole = UserRole.USER
    reputation: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        """Whether the user may moderate other users' content."""
        return self.role == UserRole.ADMIN
