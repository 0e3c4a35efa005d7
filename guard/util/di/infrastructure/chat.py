"""Chat infrastructure providers."""

from dishka import Scope, provide

from guard.adapter.stream.client import RealStreamChatClient
from guard.config import Settings
from guard.domain.service import ChatClient
from guard.util.di.base import ProviderBase
from guard.util.error import ConfigurationError

PLACEHOLDER = "CHANGE_ME_IN_PRODUCTION"


class ChatProvider(ProviderBase):
    """Chat component base."""

    __mock_component__ = "chat"


class ProdChatProvider(ChatProvider):
    """Production chat provider backed by Stream Chat."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_chat_client(self, settings: Settings) -> ChatClient:
        """Provide Stream Chat client.

        Raises:
            ConfigurationError: If Stream credentials are not configured in production
        """
        chat = settings.chat
        if settings.environment == "production" and PLACEHOLDER in (
            chat.api_key,
            chat.api_secret,
        ):
            raise ConfigurationError("Stream Chat API key and secret must be configured")

        return RealStreamChatClient(
            api_key=chat.api_key,
            api_secret=chat.api_secret,
            base_url=chat.base_url,
            timeout=chat.timeout_seconds,
        )
