"""User use cases."""

from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)

__all__ = ["GetUserProfileRequest", "GetUserProfileResponse", "GetUserProfileUseCase"]
