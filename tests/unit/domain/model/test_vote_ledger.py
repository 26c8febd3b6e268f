"""Unit tests for the vote ledger on questions and answers."""

from uuid import uuid4

import pytest

from stackit.domain.model import Answer, Question
from stackit.domain.value import AnswerId, QuestionId, UserId, VoteType


def make_question(**overrides) -> Question:
    fields = dict(
        id=QuestionId(uuid4()),
        title="How do I reverse a list?",
        description="In Python",
        user_id=UserId(uuid4()),
    )
    fields.update(overrides)
    return Question(**fields)


class TestCastVote:
    """Toggle and switch semantics of cast_vote."""

    def test_first_upvote_is_recorded(self):
        """A new upvote adds the voter and bumps the count."""
        # Arrange
        question = make_question()
        voter = UserId(uuid4())

        # Act
        outcome = question.cast_vote(voter, VoteType.UPVOTE)

        # Assert
        assert outcome.entity.upvotes == [voter]
        assert outcome.entity.downvotes == []
        assert outcome.entity.vote_count == 1
        assert outcome.previous is None
        assert outcome.current == VoteType.UPVOTE
        assert outcome.is_new_vote

    def test_repeating_a_vote_withdraws_it(self):
        """Casting the same vote twice leaves no vote behind."""
        # Arrange
        voter = UserId(uuid4())
        question = make_question(upvotes=[voter])

        # Act
        outcome = question.cast_vote(voter, VoteType.UPVOTE)

        # Assert
        assert outcome.entity.upvotes == []
        assert outcome.entity.vote_count == 0
        assert outcome.previous == VoteType.UPVOTE
        assert outcome.current is None
        assert not outcome.is_new_vote

    def test_opposite_vote_switches_sides(self):
        """Downvoting after an upvote moves the voter to downvotes."""
        # Arrange
        voter = UserId(uuid4())
        question = make_question(upvotes=[voter])

        # Act
        outcome = question.cast_vote(voter, VoteType.DOWNVOTE)

        # Assert
        assert outcome.entity.upvotes == []
        assert outcome.entity.downvotes == [voter]
        assert outcome.entity.vote_count == -1
        assert not outcome.is_new_vote

    def test_other_voters_are_untouched(self):
        """Only the voter's own membership changes."""
        # Arrange
        alice, bob, carol = (UserId(uuid4()) for _ in range(3))
        answer = Answer(
            id=AnswerId(uuid4()),
            content="Use reversed()",
            user_id=UserId(uuid4()),
            question_id=QuestionId(uuid4()),
            upvotes=[alice],
            downvotes=[bob],
        )

        # Act
        outcome = answer.cast_vote(carol, VoteType.UPVOTE)

        # Assert
        assert outcome.entity.upvotes == [alice, carol]
        assert outcome.entity.downvotes == [bob]
        assert outcome.entity.vote_count == 1
        assert isinstance(outcome.entity, Answer)

    def test_original_entity_is_not_modified(self):
        """cast_vote returns a copy."""
        question = make_question()

        question.cast_vote(UserId(uuid4()), VoteType.DOWNVOTE)

        assert question.downvotes == []
        assert question.vote_count == 0


class TestLedgerValidation:
    """Rules enforced when building a votable entity."""

    def test_vote_count_is_derived_from_membership(self):
        """A stale stored count is replaced by upvotes minus downvotes."""
        question = make_question(
            upvotes=[UserId(uuid4()), UserId(uuid4())],
            downvotes=[UserId(uuid4())],
            vote_count=42,
        )

        assert question.vote_count == 1

    def test_user_on_both_sides_is_rejected(self):
        """A user cannot upvote and downvote the same item."""
        voter = UserId(uuid4())

        with pytest.raises(ValueError, match="both upvote and downvote"):
            make_question(upvotes=[voter], downvotes=[voter])

    def test_duplicate_upvote_is_rejected(self):
        voter = UserId(uuid4())

        with pytest.raises(ValueError, match="Duplicate user in upvotes"):
            make_question(upvotes=[voter, voter])

    def test_vote_of_reports_current_vote(self):
        up, down, none = (UserId(uuid4()) for _ in range(3))
        question = make_question(upvotes=[up], downvotes=[down])

        assert question.vote_of(up) == VoteType.UPVOTE
        assert question.vote_of(down) == VoteType.DOWNVOTE
        assert question.vote_of(none) is None


class TestQuestionTags:
    """Tag normalization."""

    def test_tags_are_stripped_and_deduplicated(self):
        question = make_question(tags=[" python ", "lists", "python", "  "])

        assert question.tags == ["python", "lists"]
