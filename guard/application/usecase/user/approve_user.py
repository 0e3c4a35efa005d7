"""Approve user use case."""

import logfire

from guard.application.usecase.base import BaseUseCase, CamelModel
from guard.domain.service import UserService
from guard.domain.value import UserStatus


class ApproveUserRequest(CamelModel):
    """Approve user request."""

    email: str


class ApproveUserResponse(CamelModel):
    """Approve user response."""

    user_id: str
    email: str
    previous_status: UserStatus
    status: UserStatus


class ApproveUserUseCase(BaseUseCase):
    """Moderator action promoting a pending account to approved.

    Approving an already approved account changes nothing.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize approve user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ApproveUserRequest) -> ApproveUserResponse:
        """Approve the account.

        Raises:
            NotFoundError: If no account has this email
        """
        user = await self.user_service.get_by_email(request.email)

        if not user.is_approved:
            await self.user_service.approve(user.id)
        else:
            logfire.info("User already approved", user_id=str(user.id))

        return ApproveUserResponse(
            user_id=str(user.id),
            email=user.email,
            previous_status=user.status,
            status=UserStatus.APPROVED,
        )
