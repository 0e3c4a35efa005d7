"""Chat token use case."""

from uuid import UUID

from guard.application.usecase.base import BaseUseCase, CamelModel
from guard.domain.error import NotAuthenticatedError, NotFoundError, UpstreamError
from guard.domain.service import ChatService, JWTService, UserService
from guard.domain.value import UserId
from guard.util.jwt import JWTError


class ChatTokenRequest(CamelModel):
    """Chat token request."""

    session_token: str | None = None


class ChatTokenResponse(CamelModel):
    """Chat token response."""

    user_id: str
    chat_token: str


class ChatTokenUseCase(BaseUseCase):
    """Use case for refreshing the chat token of a logged-in user."""

    def __init__(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        chat_service: ChatService,
    ) -> None:
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.chat_service = chat_service

    async def execute(self, request: ChatTokenRequest) -> ChatTokenResponse:
        """Verify the session and hand out a chat token.

        Raises:
            NotAuthenticatedError: If the session token is missing, invalid
                or belongs to a deleted user
            UpstreamError: If the chat provider is unavailable
        """
        if not request.session_token:
            raise NotAuthenticatedError("Not authenticated")

        try:
            payload = self.jwt_service.verify_token(request.session_token)
            user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))
        except (JWTError, ValueError, NotFoundError) as e:
            raise NotAuthenticatedError("Invalid or expired session") from e

        chat_token = await self.chat_service.open_session(user)
        if chat_token is None:
            raise UpstreamError("stream_chat", "chat identity unavailable")

        return ChatTokenResponse(user_id=str(user.id), chat_token=chat_token)
