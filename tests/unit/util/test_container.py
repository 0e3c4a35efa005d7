"""Unit tests for the production container startup check."""

import pytest

from guard.config import AuthSettings, ChatSettings, Settings
from guard.util.di.container import check_production_secrets, create_container
from guard.util.error import ConfigurationError


def production_settings(**overrides) -> Settings:
    return Settings(environment="production", **overrides)


class TestCheckProductionSecrets:
    """Tests for check_production_secrets."""

    def test_placeholder_secrets_are_named(self):
        settings = production_settings(auth=AuthSettings(), chat=ChatSettings())

        with pytest.raises(ConfigurationError) as exc_info:
            check_production_secrets(settings)

        assert "AUTH__JWT_SECRET" in str(exc_info.value)
        assert "CHAT__API_SECRET" in str(exc_info.value)

    def test_configured_secrets_pass(self):
        settings = production_settings(
            auth=AuthSettings(jwt_secret="s3cret"),
            chat=ChatSettings(api_key="key", api_secret="chat-s3cret"),
        )

        check_production_secrets(settings)

    def test_placeholders_allowed_outside_production(self):
        settings = Settings(environment="development", auth=AuthSettings())

        check_production_secrets(settings)

    def test_create_container_refuses_placeholder_secrets(self):
        settings = production_settings(auth=AuthSettings(), chat=ChatSettings())

        with pytest.raises(ConfigurationError):
            create_container(settings)
