"""JWT token domain service."""

import logfire

from stackit.config import AuthSettings
from stackit.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
