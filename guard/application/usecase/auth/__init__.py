"""Authentication use cases."""

from .chat_token import ChatTokenRequest, ChatTokenResponse, ChatTokenUseCase
from .login import LoginRequest, LoginResponse, LoginUseCase
from .signup import SignupRequest, SignupResponse, SignupUseCase

__all__ = [
    "ChatTokenRequest",
    "ChatTokenResponse",
    "ChatTokenUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "SignupRequest",
    "SignupResponse",
    "SignupUseCase",
]
