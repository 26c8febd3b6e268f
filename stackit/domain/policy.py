"""Authorization policy for content mutations.

Every handler that changes a question, answer or notification asks this
module instead of comparing ids inline.
"""

from enum import Enum

from stackit.domain.error import NotAuthorizedError
from stackit.domain.model import User
from stackit.domain.value import UserId


class Action(str, Enum):
    """Mutating actions guarded by the policy."""

    UPDATE = "update"  # Owner only
    DELETE = "delete"  # Owner or admin
    ACCEPT = "accept"  # Question owner only
    READ_PRIVATE = "read"  # Recipient only (notifications)


_ADMIN_ACTIONS = frozenset({Action.DELETE})


def can_mutate(actor: User, owner_id: UserId, action: Action) -> bool:
    """Decide whether ``actor`` may perform ``action`` on content owned by ``owner_id``.

    Args:
        actor: Authenticated user performing the action
        owner_id: Owner of the target content
        action: Action being attempted

    Returns:
        True if the action is allowed
    """
    if actor.id == owner_id:
        return True
    return action in _ADMIN_ACTIONS and actor.is_admin


def ensure_can_mutate(
    actor: User,
    owner_id: UserId,
    action: Action,
    resource: str,
    resource_id: str,
) -> None:
    """Raise if ``actor`` may not perform ``action``.

    Raises:
        NotAuthorizedError: If the policy denies the action
    """
    if not can_mutate(actor, owner_id, action):
        raise NotAuthorizedError(action.value, resource, resource_id, str(actor.id))
