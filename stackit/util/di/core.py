"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from stackit.config import AuthSettings, ForumSettings, ReputationSettings, Settings
from stackit.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_forum_settings(self, settings: Settings) -> ForumSettings:
        return settings.forum

    @provide
    def provide_reputation_settings(self, settings: Settings) -> ReputationSettings:
        return settings.reputation
