"""List users use case."""

from guard.application.usecase.base import BaseUseCase, CamelModel
from guard.domain.service import UserService

from .get_user import UserResponse


class ListUsersResponse(CamelModel):
    """List users response."""

    users: list[UserResponse]
    count: int


class ListUsersUseCase(BaseUseCase):
    """Use case for listing all users."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: None = None) -> ListUsersResponse:
        users = await self.user_service.list_users()
        return ListUsersResponse(
            users=[UserResponse.from_user(user) for user in users],
            count=len(users),
        )
