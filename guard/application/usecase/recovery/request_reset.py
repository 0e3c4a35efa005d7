"""Request password reset use case."""

from datetime import datetime

from guard.application.usecase.base import BaseUseCase, CamelModel
from guard.domain.error import ValidationError
from guard.domain.service import RecoveryService
from guard.domain.value import RecoveryScheme


class RequestResetRequest(CamelModel):
    """Request reset request."""

    email: str | None = None


class RequestResetResponse(CamelModel):
    """Request reset response."""

    message: str
    expires_at: datetime


class RequestResetUseCase(BaseUseCase):
    """Use case for emailing a password reset secret.

    The scheme decides whether the user receives a link or a code.
    """

    def __init__(self, recovery_service: RecoveryService) -> None:
        """Initialize request reset use case.

        Args:
            recovery_service: Password recovery domain service
        """
        self.recovery_service = recovery_service

    async def execute(
        self, request: RequestResetRequest, scheme: RecoveryScheme = RecoveryScheme.CODE
    ) -> RequestResetResponse:
        """Issue and send a reset secret.

        Raises:
            ValidationError: If no email was given
            NotFoundError: If no account has this email
            RateLimitedError: If a previous secret is still valid
            UpstreamError: If the email could not be sent
        """
        if not request.email or not request.email.strip():
            raise ValidationError("Email is required")

        expires_at = await self.recovery_service.request_reset(request.email, scheme)

        if scheme == RecoveryScheme.TOKEN:
            message = "Password reset link sent to your email"
        else:
            message = "Password reset code sent to your email"

        return RequestResetResponse(message=message, expires_at=expires_at)
