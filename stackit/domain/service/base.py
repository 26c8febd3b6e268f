"""Base service class for domain services."""

from pydantic import ValidationError as ModelValidationError

from stackit.domain.error import ValidationError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def validation_error(resource: str, error: ModelValidationError) -> ValidationError:
    """Turn an entity validation failure into a domain ``ValidationError``.

    The message names the first failing field, e.g. ``title: String should
    have at most 300 characters``.
    """
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    message = f"{field}: {first['msg']}" if field else first["msg"]
    return ValidationError(resource, message)
