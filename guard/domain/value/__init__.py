"""Domain value objects for ChildGuard."""

from guard.domain.value.identifiers import ArticleId, ReportId, UserId
from guard.domain.value.types import (
    EmailMessage,
    Evidence,
    RecoveryScheme,
    UserRole,
    UserStatus,
    normalize_email,
)

__all__ = [
    # Identifiers
    "UserId",
    "ReportId",
    "ArticleId",
    # Types
    "UserStatus",
    "UserRole",
    "RecoveryScheme",
    "Evidence",
    "EmailMessage",
    "normalize_email",
]
