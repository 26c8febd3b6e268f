"""Unit tests for JWT helpers."""

from datetime import datetime, timedelta

import jwt
import pytest

from stackit.config import AuthSettings
from stackit.util.jwt import JWTError, create_token, verify_token


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret="test-secret", jwt_expiry_days=1)


class TestJWT:
    """Token creation and verification."""

    def test_token_round_trip_keeps_claims(self, auth_settings):
        token = create_token("user-1", "alice", auth_settings)

        payload = verify_token(token, auth_settings)

        assert payload.user_id == "user-1"
        assert payload.username == "alice"

    def test_wrong_secret_is_rejected(self, auth_settings):
        token = create_token("user-1", "alice", auth_settings)
        other = AuthSettings(jwt_secret="another-secret")

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, other)

    def test_expired_token_is_rejected(self, auth_settings):
        token = jwt.encode(
            {
                "user_id": "user-1",
                "username": "alice",
                "exp": datetime.now() - timedelta(days=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, auth_settings)

    def test_garbage_is_rejected(self, auth_settings):
        with pytest.raises(JWTError):
            verify_token("not-a-jwt", auth_settings)
