"""Unit tests for LoginUseCase."""

import pytest

from guard.application.usecase.auth import LoginRequest, LoginUseCase
from guard.domain.error import InvalidCredentialsError, PendingApprovalError
from guard.domain.repository import UserRepository
from guard.domain.service import ChatClient, JWTService, PasswordService
from guard.domain.value import UserStatus
from tests.harness import create_env_fixture, make_user

unit_env = create_env_fixture()


async def seed_user(container, status: UserStatus = UserStatus.APPROVED):
    password_service = await container.get(PasswordService)
    repo = await container.get(UserRepository)
    password_hash = await password_service.hash_password("s3cret-pass")
    return await repo.save(make_user(password_hash=password_hash, status=status))


class TestLoginUseCase:
    """Tests for login."""

    @pytest.mark.asyncio
    async def test_login_returns_session_and_chat_tokens(self, unit_env):
        # Arrange
        user = await seed_user(unit_env)
        use_case = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        chat_client = await unit_env.get(ChatClient)

        # Act
        response = await use_case.execute(
            LoginRequest(email="Ama@example.com", password="s3cret-pass")
        )

        # Assert
        assert response.user_id == str(user.id)
        assert response.name == user.name
        assert response.phone == user.phone
        assert jwt_service.verify_token(response.session_token).user_id == str(user.id)
        assert response.chat_token == f"mock-chat-token-{user.id}"
        assert chat_client.identities[str(user.id)] == user.name

    @pytest.mark.asyncio
    async def test_response_uses_camel_case(self, unit_env):
        await seed_user(unit_env)
        use_case = await unit_env.get(LoginUseCase)

        response = await use_case.execute(
            LoginRequest(email="ama@example.com", password="s3cret-pass")
        )

        body = response.model_dump(by_alias=True)
        assert {"sessionToken", "userId", "chatToken"} <= body.keys()

    @pytest.mark.asyncio
    async def test_login_succeeds_without_chat(self, unit_env):
        # Arrange
        await seed_user(unit_env)
        chat_client = await unit_env.get(ChatClient)
        chat_client.fail_upsert = True
        use_case = await unit_env.get(LoginUseCase)

        # Act
        response = await use_case.execute(
            LoginRequest(email="ama@example.com", password="s3cret-pass")
        )

        # Assert
        assert response.session_token
        assert response.chat_token is None

    @pytest.mark.asyncio
    async def test_pending_user_cannot_login(self, unit_env):
        await seed_user(unit_env, status=UserStatus.PENDING)
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(PendingApprovalError):
            await use_case.execute(
                LoginRequest(email="ama@example.com", password="s3cret-pass")
            )

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        await seed_user(unit_env)
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(InvalidCredentialsError):
            await use_case.execute(
                LoginRequest(email="ama@example.com", password="wrong-pass")
            )
