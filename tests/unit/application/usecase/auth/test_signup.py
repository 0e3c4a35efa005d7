"""Unit tests for SignupUseCase."""

import pytest

from guard.application.usecase.auth import SignupRequest, SignupUseCase
from guard.domain.error import ConflictError, ValidationError
from guard.domain.repository import UserRepository
from guard.domain.value import UserStatus
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSignupUseCase:
    """Tests for account registration."""

    @pytest.mark.asyncio
    async def test_signup_creates_pending_account(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SignupUseCase)
        request = SignupRequest.model_validate(
            {
                "name": "Ama Mensah",
                "email": "ama@example.com",
                "password": "s3cret-pass",
                "phone": "+233201234567",
                "identityDocument": "aWQ=",
                "selfieImage": "c2VsZmll",
            }
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.status == UserStatus.PENDING
        assert "pending approval" in response.message

        repo = await unit_env.get(UserRepository)
        user = await repo.find_by_email("ama@example.com")
        assert str(user.id) == response.user_id
        assert user.identity_document == "aWQ="

    @pytest.mark.asyncio
    async def test_legacy_field_names_are_accepted(self, unit_env):
        use_case = await unit_env.get(SignupUseCase)
        request = SignupRequest.model_validate(
            {
                "name": "Kofi Boateng",
                "email": "kofi@example.com",
                "password": "s3cret-pass",
                "phone": "+233207654321",
                "validId": "aWQ=",
                "selfie": "c2VsZmll",
            }
        )

        response = await use_case.execute(request)

        repo = await unit_env.get(UserRepository)
        user = await repo.find_by_email("kofi@example.com")
        assert str(user.id) == response.user_id
        assert user.selfie_image == "c2VsZmll"

    @pytest.mark.asyncio
    async def test_missing_field_raises_validation_error(self, unit_env):
        use_case = await unit_env.get(SignupUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                SignupRequest(name="Ama", email="ama@example.com", password="pw")
            )

    @pytest.mark.asyncio
    async def test_duplicate_email_raises_conflict(self, unit_env):
        use_case = await unit_env.get(SignupUseCase)
        request = SignupRequest(
            name="Ama Mensah",
            email="ama@example.com",
            password="s3cret-pass",
            phone="+233201234567",
            identity_document="aWQ=",
            selfie_image="c2VsZmll",
        )
        await use_case.execute(request)

        with pytest.raises(ConflictError):
            await use_case.execute(request)
