"""Login use case."""

import logfire

from guard.application.usecase.base import BaseUseCase, CamelModel
from guard.domain.service import ChatService, JWTService, UserService


class LoginRequest(CamelModel):
    """Login request."""

    email: str | None = None
    password: str | None = None


class LoginResponse(CamelModel):
    """Login response.

    ``chat_token`` is None when the chat provider was unavailable.
    """

    session_token: str
    user_id: str
    name: str
    email: str
    phone: str
    chat_token: str | None


class LoginUseCase(BaseUseCase):
    """Use case for email/password login."""

    def __init__(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        chat_service: ChatService,
    ) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
            chat_service: Chat identity domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service
        self.chat_service = chat_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Verify credentials and approval status
        2. Issue a session token
        3. Provision the chat identity and sign a chat token

        Args:
            request: Login request with credentials

        Returns:
            Session token, profile fields and chat token

        Raises:
            InvalidCredentialsError: If email or password is wrong
            PendingApprovalError: If the account is not approved
        """
        user = await self.user_service.authenticate(request.email, request.password)

        with logfire.span("login_user", user_id=str(user.id)):
            session_token = self.jwt_service.create_token(str(user.id))
            chat_token = await self.chat_service.open_session(user)

            return LoginResponse(
                session_token=session_token,
                user_id=str(user.id),
                name=user.name,
                email=user.email,
                phone=user.phone,
                chat_token=chat_token,
            )
