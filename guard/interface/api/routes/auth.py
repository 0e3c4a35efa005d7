"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status

from guard.application.usecase.auth import (
    ChatTokenRequest,
    ChatTokenResponse,
    ChatTokenUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    SignupRequest,
    SignupResponse,
    SignupUseCase,
)

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


def _bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


@router.post(
    "/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: SignupRequest,
    signup_use_case: FromDishka[SignupUseCase],
) -> SignupResponse:
    """Register a new account.

    The account starts pending and cannot log in until a moderator
    approves it.

    Example:
        POST /signup

        Request:
        {
            "name": "Ama Mensah",
            "email": "ama@example.com",
            "password": "...",
            "phone": "+233201234567",
            "identityDocument": "<base64>",
            "selfieImage": "<base64>"
        }

        Response (201):
        {
            "message": "User registered successfully. Your account is pending approval.",
            "userId": "123e4567-e89b-12d3-a456-426614174000",
            "status": "pending"
        }
    """
    return await signup_use_case.execute(request)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Log in with email and password.

    Returns 400 for wrong credentials and 403 while the account is pending.
    ``chatToken`` is null if the chat provider could not be reached.
    """
    return await login_use_case.execute(request)


@router.post("/chat/token", response_model=ChatTokenResponse)
async def chat_token(
    chat_token_use_case: FromDishka[ChatTokenUseCase],
    authorization: str | None = Header(default=None),
) -> ChatTokenResponse:
    """Issue a fresh chat token for the logged-in user.

    Requires ``Authorization: Bearer <sessionToken>``.
    """
    return await chat_token_use_case.execute(
        ChatTokenRequest(session_token=_bearer_token(authorization))
    )
