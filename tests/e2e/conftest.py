"""Fixtures for API tests against the in-memory container."""

from dataclasses import dataclass

import pytest_asyncio
from dishka import AsyncContainer
from httpx import ASGITransport, AsyncClient

from stackit.config import AuthSettings
from stackit.domain.model import User
from stackit.domain.value import UserRole
from stackit.interface.api.app import create_app
from stackit.util.jwt import create_token
from tests.di import build_test_container
from tests.harness import create_user


@dataclass
class API:
    """Test client plus helpers for seeding users."""

    client: AsyncClient
    container: AsyncContainer

    async def register(
        self, username: str, role: UserRole = UserRole.USER
    ) -> tuple[User, dict[str, str]]:
        """Create a user and return it with ready-made auth headers."""
        async with self.container() as request_container:
            user = await create_user(request_container, username, role=role)
        auth_settings = await self.container.get(AuthSettings)
        token = create_token(str(user.id), username, auth_settings)
        return user, {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def api():
    container = build_test_container()
    app = create_app(container)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield API(client=client, container=container)
    await container.close()
