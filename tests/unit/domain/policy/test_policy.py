"""Unit tests for the content mutation policy."""

from uuid import uuid4

import pytest

from stackit.domain.error import NotAuthorizedError
from stackit.domain.model import User
from stackit.domain.policy import Action, can_mutate, ensure_can_mutate
from stackit.domain.value import UserId, UserRole, Username


def make_user(role: UserRole = UserRole.USER) -> User:
    return User(id=UserId(uuid4()), username=Username("someone"), role=role)


class TestCanMutate:
    """Tests for can_mutate."""

    @pytest.mark.parametrize("action", list(Action))
    def test_owner_may_do_everything(self, action):
        """The owner passes every check."""
        owner = make_user()

        assert can_mutate(owner, owner.id, action)

    @pytest.mark.parametrize("action", list(Action))
    def test_stranger_may_do_nothing(self, action):
        """A regular user cannot touch someone else's content."""
        stranger = make_user()

        assert not can_mutate(stranger, UserId(uuid4()), action)

    def test_admin_may_delete_others_content(self):
        admin = make_user(UserRole.ADMIN)

        assert can_mutate(admin, UserId(uuid4()), Action.DELETE)

    @pytest.mark.parametrize(
        "action", [Action.UPDATE, Action.ACCEPT, Action.READ_PRIVATE]
    )
    def test_admin_may_not_edit_or_accept_for_others(self, action):
        """Moderation covers deletion only."""
        admin = make_user(UserRole.ADMIN)

        assert not can_mutate(admin, UserId(uuid4()), action)


class TestEnsureCanMutate:
    """Tests for ensure_can_mutate."""

    def test_denied_action_raises_with_context(self):
        """The error carries action and resource for the HTTP message."""
        # Arrange
        stranger = make_user()
        question_id = str(uuid4())

        # Act
        with pytest.raises(NotAuthorizedError) as exc_info:
            ensure_can_mutate(
                stranger, UserId(uuid4()), Action.UPDATE, "question", question_id
            )

        # Assert
        assert exc_info.value.action == "update"
        assert exc_info.value.resource == "question"
        assert exc_info.value.resource_id == question_id

    def test_allowed_action_returns_none(self):
        owner = make_user()

        assert (
            ensure_can_mutate(owner, owner.id, Action.ACCEPT, "question", "q") is None
        )
