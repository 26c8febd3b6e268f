"""Vote ledger shared by questions and answers.

Each votable entity carries the ids of the users who upvoted and downvoted
it. The two lists are the source of truth; ``vote_count`` is a cached
``len(upvotes) - len(downvotes)`` kept for cheap sorting and display.
"""

from typing import Any, Optional

from pydantic import Field, model_validator

from stackit.domain.model.common import DomainModel
from stackit.domain.value import UserId, VoteType
from stackit.domain.value.common import ValueObject


class Votable(DomainModel):
    """Base for entities that can be upvoted or downvoted.

    Business rules:
    - A user is in at most one of upvotes/downvotes
    - Casting the same vote twice removes it (toggle)
    - Casting the opposite vote moves the user to the other side
    """

    upvotes: list[UserId] = Field(default_factory=list)
    downvotes: list[UserId] = Field(default_factory=list)
    vote_count: int = 0

    @model_validator(mode="before")
    @classmethod
    def derive_vote_count(cls, data: Any) -> Any:
        """Recompute the cached count from the membership lists."""
        if isinstance(data, dict):
            upvotes = data.get("upvotes") or []
            downvotes = data.get("downvotes") or []
            data = {**data, "vote_count": len(upvotes) - len(downvotes)}
        return data

    @model_validator(mode="after")
    def validate_vote_membership(self) -> "Votable":
        """Validate that no user votes twice."""
        if len(set(self.upvotes)) != len(self.upvotes):
            raise ValueError("Duplicate user in upvotes")
        if len(set(self.downvotes)) != len(self.downvotes):
            raise ValueError("Duplicate user in downvotes")
        if set(self.upvotes) & set(self.downvotes):
            raise ValueError("A user cannot both upvote and downvote the same item")
        return self

    def vote_of(self, user_id: UserId) -> Optional[VoteType]:
        """Return the user's current vote, if any."""
        if user_id in self.upvotes:
            return VoteType.UPVOTE
        if user_id in self.downvotes:
            return VoteType.DOWNVOTE
        return None

    def cast_vote(self, voter_id: UserId, vote_type: VoteType) -> "VoteOutcome":
        """Apply a vote with toggle semantics.

        Args:
            voter_id: User casting the vote
            vote_type: Requested vote direction

        Returns:
            Outcome holding the updated entity and the before/after vote
        """
        previous = self.vote_of(voter_id)
        upvotes = [u for u in self.upvotes if u != voter_id]
        downvotes = [u for u in self.downvotes if u != voter_id]

        current: Optional[VoteType]
        if previous == vote_type:
            current = None
        elif vote_type == VoteType.UPVOTE:
            current = VoteType.UPVOTE
            upvotes.append(voter_id)
        else:
            current = VoteType.DOWNVOTE
            downvotes.append(voter_id)

        updated = self.model_copy(
            update={
                "upvotes": upvotes,
                "downvotes": downvotes,
                "vote_count": len(upvotes) - len(downvotes),
            }
        )
        return VoteOutcome(entity=updated, previous=previous, current=current)


class VoteOutcome(ValueObject):
    """Result of casting a vote on a votable entity."""

    entity: Votable
    previous: Optional[VoteType] = None
    current: Optional[VoteType] = None

    @property
    def is_new_vote(self) -> bool:
        """True when the voter went from no vote to a vote.

        Toggling a vote off or switching sides is not a new vote.
        """
        return self.previous is None and self.current is not None
