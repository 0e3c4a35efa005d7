"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from guard.config import (
    AuthSettings,
    ChatSettings,
    EmailSettings,
    RecoverySettings,
    Settings,
)
from guard.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_recovery_settings(self, settings: Settings) -> RecoverySettings:
        """Provide password recovery settings."""
        return settings.recovery

    @provide(scope=Scope.APP)
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        """Provide SMTP settings."""
        return settings.email

    @provide(scope=Scope.APP)
    def provide_chat_settings(self, settings: Settings) -> ChatSettings:
        """Provide Stream Chat settings."""
        return settings.chat
