"""Dependency injection container.

Wires settings, the account and recovery services, the use cases behind
each route, and the three swappable infrastructure components: PostgreSQL
repositories, the Stream Chat client and the SMTP sender.
"""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from guard.config import Settings
from guard.util.di import PROVIDERS, get_provider
from guard.util.error import ConfigurationError

PLACEHOLDER = "CHANGE_ME_IN_PRODUCTION"


def check_production_secrets(settings: Settings) -> None:
    """Refuse to run production with placeholder secrets.

    Session tokens and chat tokens are both signed with these, so a default
    value would let anyone mint them.

    Raises:
        ConfigurationError: If a signing secret still has its placeholder value
    """
    if settings.environment != "production":
        return

    unset = [
        name
        for name, value in (
            ("AUTH__JWT_SECRET", settings.auth.jwt_secret),
            ("CHAT__API_SECRET", settings.chat.api_secret),
        )
        if value == PLACEHOLDER
    ]
    if unset:
        raise ConfigurationError(f"Production secrets not configured: {', '.join(unset)}")


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the production container.

    Every mockable component gets its production implementation. Provider
    settings are loaded from the environment inside the container; the
    ``settings`` argument is only used for the startup check.

    Args:
        settings: Settings to validate, loaded from the environment when omitted

    Returns:
        Configured DI container with production providers

    Raises:
        ConfigurationError: If production runs with placeholder secrets
    """
    check_production_secrets(settings or Settings())

    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider supplies the Request context to route dependencies
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Attach the container to the FastAPI app.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
