"""Chat identity domain service."""

import logfire

from guard.domain.error import UpstreamError
from guard.domain.model import User

from .base import Service


class ChatClient:
    """Generic chat provider interface.

    Implementations raise UpstreamError when the provider fails or times out.
    """

    async def upsert_identity(self, user_id: str, name: str) -> None:
        """Create or update the user on the chat provider.

        Args:
            user_id: Local user ID, reused as the chat user ID
            name: Display name
        """
        raise NotImplementedError

    def create_session_token(self, user_id: str) -> str:
        """Sign a chat token the mobile client uses to connect.

        Args:
            user_id: Chat user ID

        Returns:
            Chat user token
        """
        raise NotImplementedError

    async def delete_identity(self, user_id: str) -> None:
        """Hard-delete the user on the chat provider.

        Args:
            user_id: Chat user ID
        """
        raise NotImplementedError


class ChatService(Service):
    """Keeps chat identities in step with local accounts."""

    def __init__(self, chat_client: ChatClient) -> None:
        """Initialize chat service.

        Args:
            chat_client: Chat provider client
        """
        self.chat_client = chat_client

    async def open_session(self, user: User) -> str | None:
        """Upsert the user's chat identity and return a chat token.

        A provider failure does not block login: the error is logged and
        None is returned so the app can retry chat later.

        Args:
            user: Authenticated user

        Returns:
            Chat token, or None if the provider was unavailable
        """
        user_id = str(user.id)
        with logfire.span("chat_service.open_session", user_id=user_id):
            try:
                await self.chat_client.upsert_identity(user_id, user.name)
            except UpstreamError as e:
                logfire.warn(
                    "Chat identity upsert failed, continuing without chat token",
                    user_id=user_id,
                    error=str(e),
                )
                return None

            token = self.chat_client.create_session_token(user_id)
            logfire.info("Chat token created", user_id=user_id)
            return token

    async def revoke_identity(self, user_id: str) -> bool:
        """Hard-delete the chat identity.

        Returns:
            True if the provider confirmed the delete
        """
        with logfire.span("chat_service.revoke_identity", user_id=user_id):
            try:
                await self.chat_client.delete_identity(user_id)
            except UpstreamError as e:
                logfire.error(
                    "Chat identity delete failed", user_id=user_id, error=str(e)
                )
                return False

            logfire.info("Chat identity deleted", user_id=user_id)
            return True
