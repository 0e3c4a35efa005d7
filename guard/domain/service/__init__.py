"""Domain services."""

from .base import Service
from .chat_service import ChatClient, ChatService
from .email_service import EmailSender
from .jwt_service import JWTService
from .password_service import PasswordService
from .recovery_policy import CodeSecretPolicy, RecoverySecretPolicy, TokenSecretPolicy
from .recovery_service import RecoveryService
from .report_service import ReportService
from .user_service import UserService

__all__ = [
    "ChatClient",
    "ChatService",
    "CodeSecretPolicy",
    "EmailSender",
    "JWTService",
    "PasswordService",
    "RecoveryService",
    "RecoverySecretPolicy",
    "ReportService",
    "Service",
    "TokenSecretPolicy",
    "UserService",
]
