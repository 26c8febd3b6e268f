"""Unit tests for Settings."""

from stackit.config import Settings


class TestAPISettings:
    """API settings derived from the environment."""

    def test_development_frontend_is_local(self):
        settings = Settings(environment="development", frontend_host="localhost")

        assert settings.api.frontend_url == "http://localhost:3000"

    def test_production_frontend_uses_https(self):
        settings = Settings(environment="production", frontend_host="stackit.example")

        assert settings.api.protocol == "https"
        assert settings.api.frontend_url == "https://stackit.example"

    def test_only_frontend_url_is_derived(self):
        settings = Settings(port=8080)

        assert settings.api.port == 8080
        assert set(settings.api.model_dump()) == {
            "port",
            "protocol",
            "frontend_host",
            "frontend_url",
        }
