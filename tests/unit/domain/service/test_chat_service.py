"""Unit tests for ChatService."""

import pytest

from guard.adapter.stream import MockStreamChatClient
from guard.domain.service import ChatService
from tests.harness import make_user


class TestChatService:
    """Tests for chat identity sync."""

    @pytest.mark.asyncio
    async def test_open_session_upserts_and_returns_token(self):
        # Arrange
        client = MockStreamChatClient()
        service = ChatService(client)
        user = make_user()

        # Act
        token = await service.open_session(user)

        # Assert
        assert token == f"mock-chat-token-{user.id}"
        assert client.identities[str(user.id)] == user.name

    @pytest.mark.asyncio
    async def test_open_session_returns_none_on_provider_failure(self):
        client = MockStreamChatClient()
        client.fail_upsert = True
        service = ChatService(client)

        assert await service.open_session(make_user()) is None

    @pytest.mark.asyncio
    async def test_revoke_identity(self):
        client = MockStreamChatClient()
        client.identities["u-1"] = "Ama"
        service = ChatService(client)

        assert await service.revoke_identity("u-1") is True
        assert "u-1" not in client.identities

    @pytest.mark.asyncio
    async def test_revoke_identity_reports_failure(self):
        client = MockStreamChatClient()
        client.fail_delete = True
        service = ChatService(client)

        assert await service.revoke_identity("u-1") is False
