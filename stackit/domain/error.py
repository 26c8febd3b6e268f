"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Raised when new content breaks an entity rule (title length, empty body)."""

    def __init__(self, resource: str, message: str):
        self.resource = resource
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they may not touch."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ReferentialError(DomainError):
    """Raised when an entity points at a parent that no longer exists."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"Referenced {resource} does not exist: {identifier}")
