"""Unit tests for JWTService."""

import pytest

from stackit.config import AuthSettings
from stackit.domain.service import JWTService
from stackit.util.jwt import JWTError, create_token
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestVerifyToken:
    """JWTService only verifies tokens; they are issued elsewhere."""

    @pytest.mark.asyncio
    async def test_externally_issued_token_is_accepted(self, unit_env):
        service = await unit_env.get(JWTService)
        auth_settings = await unit_env.get(AuthSettings)
        token = create_token("user-1", "alice", auth_settings)

        payload = service.verify_token(token)

        assert payload.user_id == "user-1"
        assert payload.username == "alice"

    @pytest.mark.asyncio
    async def test_invalid_token_is_reraised(self, unit_env):
        service = await unit_env.get(JWTService)

        with pytest.raises(JWTError):
            service.verify_token("not-a-jwt")
