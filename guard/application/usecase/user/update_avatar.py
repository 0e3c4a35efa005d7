"""Update avatar use case."""

from guard.application.usecase.base import BaseUseCase, CamelModel
from guard.domain.service import UserService

from .get_user import UserResponse, parse_user_id


class UpdateAvatarRequest(CamelModel):
    """Update avatar request."""

    user_id: str
    avatar: str | None = None


class UpdateAvatarUseCase(BaseUseCase):
    """Use case for replacing a user's avatar.

    Setting the same avatar twice is a no-op.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update avatar use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateAvatarRequest) -> UserResponse:
        """Overwrite the avatar and return the updated user.

        Raises:
            ValidationError: If the ID is malformed
            NotFoundError: If the user does not exist
        """
        user_id = parse_user_id(request.user_id)
        await self.user_service.update_avatar(user_id, request.avatar)
        user = await self.user_service.get_by_id(user_id)
        return UserResponse.from_user(user)
