"""Stream Chat adapter."""

from .client import MockStreamChatClient, RealStreamChatClient, StreamChatClient

__all__ = ["StreamChatClient", "RealStreamChatClient", "MockStreamChatClient"]
