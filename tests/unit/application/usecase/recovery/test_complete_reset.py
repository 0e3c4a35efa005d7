"""Unit tests for CompleteResetUseCase."""

import pytest

from guard.application.usecase.recovery import (
    CompleteResetRequest,
    CompleteResetUseCase,
    RequestResetRequest,
    RequestResetUseCase,
)
from guard.domain.error import InvalidOrExpiredError, ValidationError
from guard.domain.repository import UserRepository
from guard.domain.value import RecoveryScheme
from tests.harness import create_env_fixture, make_user

unit_env = create_env_fixture()


async def issue_token(container) -> str:
    repo = await container.get(UserRepository)
    user = await repo.save(make_user())
    request_reset = await container.get(RequestResetUseCase)
    await request_reset.execute(
        RequestResetRequest(email=user.email), RecoveryScheme.TOKEN
    )
    return (await repo.find_by_id(user.id)).reset_secret


class TestCompleteResetUseCase:
    """Tests for completing a reset."""

    @pytest.mark.asyncio
    async def test_exact_token_resets_password(self, unit_env):
        # Arrange
        token = await issue_token(unit_env)
        use_case = await unit_env.get(CompleteResetUseCase)

        # Act
        response = await use_case.execute(
            CompleteResetRequest(
                scheme=RecoveryScheme.TOKEN, secret=token, new_password="new-pw"
            )
        )

        # Assert
        assert response.message == "Password has been reset successfully"

    @pytest.mark.asyncio
    async def test_padded_token_is_not_trimmed(self, unit_env):
        # Arrange
        token = await issue_token(unit_env)
        use_case = await unit_env.get(CompleteResetUseCase)

        # Act / Assert
        with pytest.raises(InvalidOrExpiredError):
            await use_case.execute(
                CompleteResetRequest(
                    scheme=RecoveryScheme.TOKEN,
                    secret=f"  {token}  ",
                    new_password="new-pw",
                )
            )

        # The secret was not consumed by the rejected attempt
        repo = await unit_env.get(UserRepository)
        user = await repo.find_by_email("ama@example.com")
        assert user.reset_secret == token

    @pytest.mark.asyncio
    async def test_blank_secret_is_rejected(self, unit_env):
        use_case = await unit_env.get(CompleteResetUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CompleteResetRequest(
                    scheme=RecoveryScheme.TOKEN, secret="   ", new_password="new-pw"
                )
            )
