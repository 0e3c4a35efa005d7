"""Get user use case."""

from datetime import datetime
from uuid import UUID

from guard.application.usecase.base import BaseUseCase, CamelModel
from guard.domain.error import ValidationError
from guard.domain.model import User
from guard.domain.service import UserService
from guard.domain.value import UserId, UserRole, UserStatus


def parse_user_id(raw: str) -> UserId:
    """Parse a path user ID.

    Raises:
        ValidationError: If ``raw`` is not a UUID
    """
    try:
        return UserId(UUID(raw))
    except ValueError:
        raise ValidationError(f"Malformed user id: {raw}")


class UserResponse(CamelModel):
    """Public view of a user.

    Credentials, recovery fields and identity blobs are never included.
    """

    id: str
    name: str
    email: str
    phone: str
    role: UserRole
    status: UserStatus
    avatar: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            phone=user.phone,
            role=user.role,
            status=user.status,
            avatar=user.avatar,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class GetUserRequest(CamelModel):
    """Get user request."""

    user_id: str


class GetUserUseCase(BaseUseCase):
    """Use case for fetching a single user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserResponse:
        """Fetch the user.

        Raises:
            ValidationError: If the ID is malformed
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.get_by_id(parse_user_id(request.user_id))
        return UserResponse.from_user(user)
