"""Complete password reset use case."""

from guard.application.usecase.base import BaseUseCase, CamelModel
from guard.domain.error import ValidationError
from guard.domain.service import RecoveryService
from guard.domain.value import RecoveryScheme


class CompleteResetRequest(CamelModel):
    """Complete reset request.

    For the token scheme ``secret`` is the token from the link. For the code
    scheme ``secret`` is the emailed code and ``email`` names the account.
    """

    scheme: RecoveryScheme
    secret: str | None = None
    new_password: str | None = None
    email: str | None = None


class CompleteResetResponse(CamelModel):
    """Complete reset response."""

    message: str


class CompleteResetUseCase(BaseUseCase):
    """Use case for consuming a reset secret and setting a new password."""

    def __init__(self, recovery_service: RecoveryService) -> None:
        """Initialize complete reset use case.

        Args:
            recovery_service: Password recovery domain service
        """
        self.recovery_service = recovery_service

    async def execute(self, request: CompleteResetRequest) -> CompleteResetResponse:
        """Reset the password.

        Raises:
            ValidationError: If a required field is missing
            InvalidOrExpiredError: If the secret does not match or has expired
        """
        if not request.secret or not request.secret.strip():
            raise ValidationError("Reset token or code is required")

        await self.recovery_service.complete_reset(
            request.scheme,
            request.secret,
            request.new_password or "",
            email=request.email,
        )

        return CompleteResetResponse(message="Password has been reset successfully")
