"""Mock chat providers for testing."""

from dishka import Scope, provide

from guard.adapter.stream.client import MockStreamChatClient
from guard.domain.service import ChatClient
from guard.util.di.infrastructure.chat import ChatProvider


class MockChatProvider(ChatProvider):
    """Mock chat provider using an in-memory Stream client."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_chat_client(self) -> ChatClient:
        """Provide mock Stream Chat client."""
        return MockStreamChatClient()
