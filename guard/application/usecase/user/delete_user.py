"""Delete user use case."""

from guard.application.usecase.base import BaseUseCase, CamelModel
from guard.domain.service import UserService

from .get_user import parse_user_id


class DeleteUserRequest(CamelModel):
    """Delete user request."""

    user_id: str


class DeleteUserResponse(CamelModel):
    """Delete user response.

    ``error`` is ``partial_failure`` when the account is gone locally but
    the chat identity could not be deleted.
    """

    message: str
    local_deleted: bool
    chat_identity_deleted: bool
    error: str | None = None

    @property
    def is_partial(self) -> bool:
        return self.local_deleted and not self.chat_identity_deleted


class DeleteUserUseCase(BaseUseCase):
    """Use case for deleting an account and its chat identity."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize delete user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Delete the account.

        A chat failure is returned rather than raised so the local delete
        is still committed.

        Raises:
            ValidationError: If the ID is malformed
            NotFoundError: If the user does not exist
        """
        chat_deleted = await self.user_service.delete(parse_user_id(request.user_id))

        if not chat_deleted:
            return DeleteUserResponse(
                message="User deleted, but the chat identity could not be removed",
                local_deleted=True,
                chat_identity_deleted=False,
                error="partial_failure",
            )

        return DeleteUserResponse(
            message="User and chat identity deleted successfully",
            local_deleted=True,
            chat_identity_deleted=True,
        )
