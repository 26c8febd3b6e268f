"""Authentication helper shared by routes."""

import logfire
from fastapi import HTTPException, status

from stackit.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from stackit.domain.error import NotFoundError
from stackit.util.jwt import JWTError


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the JWT from ``Authorization: Bearer`` or the ``auth_token`` cookie.

    The header wins when both are present.
    """
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token or None


async def authenticate(
    get_current_user_use_case: GetCurrentUserUseCase,
    authorization: str | None,
    auth_token: str | None,
) -> GetCurrentUserResponse:
    """Resolve the authenticated user or fail with 401.

    Args:
        get_current_user_use_case: Get current user use case from DI
        authorization: Value of the Authorization header
        auth_token: JWT token from cookie

    Returns:
        Authenticated user

    Raises:
        HTTPException: 401 if the token is missing, invalid or names no user
    """
    token = extract_token(authorization, auth_token)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, no token",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except JWTError as e:
        logfire.info("Token rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, token failed",
        )
    except NotFoundError:
        logfire.warn("Token refers to a missing user")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, user not found",
        )
