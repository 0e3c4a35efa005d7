"""Signup use case."""

import logfire
from pydantic import AliasChoices, Field

from guard.application.usecase.base import BaseUseCase, CamelModel
from guard.domain.service import UserService
from guard.domain.value import UserStatus


class SignupRequest(CamelModel):
    """Signup request.

    Presence is checked by the domain so a missing field yields the same
    error shape as a blank one. Older app builds send ``validId`` and
    ``selfie``.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None
    phone: str | None = None
    identity_document: str | None = Field(
        default=None, validation_alias=AliasChoices("identityDocument", "validId")
    )
    selfie_image: str | None = Field(
        default=None, validation_alias=AliasChoices("selfieImage", "selfie")
    )


class SignupResponse(CamelModel):
    """Signup response."""

    message: str
    user_id: str
    status: UserStatus


class SignupUseCase(BaseUseCase):
    """Use case for registering a new account pending moderation."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize signup use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Register the account.

        Raises:
            ValidationError: If a required field is missing
            ConflictError: If email or phone is taken
        """
        user = await self.user_service.register(
            name=request.name,
            email=request.email,
            password=request.password,
            phone=request.phone,
            identity_document=request.identity_document,
            selfie_image=request.selfie_image,
        )

        logfire.info("Signup completed", user_id=str(user.id))

        return SignupResponse(
            message="User registered successfully. Your account is pending approval.",
            user_id=str(user.id),
            status=user.status,
        )
