"""Unit tests for ApproveUserUseCase."""

import pytest

from guard.application.usecase.user import ApproveUserRequest, ApproveUserUseCase
from guard.domain.error import NotFoundError
from guard.domain.repository import UserRepository
from guard.domain.value import UserStatus
from tests.harness import create_env_fixture, make_user

unit_env = create_env_fixture()


class TestApproveUserUseCase:
    """Tests for moderator approval."""

    @pytest.mark.asyncio
    async def test_approves_pending_user(self, unit_env):
        # Arrange
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user(status=UserStatus.PENDING))
        use_case = await unit_env.get(ApproveUserUseCase)

        # Act
        response = await use_case.execute(ApproveUserRequest(email="AMA@example.com"))

        # Assert
        assert response.previous_status == UserStatus.PENDING
        assert response.status == UserStatus.APPROVED
        assert (await repo.find_by_id(user.id)).status == UserStatus.APPROVED

    @pytest.mark.asyncio
    async def test_already_approved_is_a_no_op(self, unit_env):
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user(status=UserStatus.APPROVED))
        use_case = await unit_env.get(ApproveUserUseCase)

        response = await use_case.execute(ApproveUserRequest(email=user.email))

        assert response.previous_status == UserStatus.APPROVED
        assert (await repo.find_by_id(user.id)).updated_at == user.updated_at

    @pytest.mark.asyncio
    async def test_unknown_email(self, unit_env):
        use_case = await unit_env.get(ApproveUserUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ApproveUserRequest(email="nobody@example.com"))
