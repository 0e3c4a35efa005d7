"""Domain value objects for ChildGuard.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from guard.domain.value.common import ValueObject


class UserStatus(str, Enum):
    """Moderation state of an account.

    New accounts start pending; a moderator promotes them to approved.
    Only approved accounts may log in.
    """

    PENDING = "pending"
    APPROVED = "approved"


class UserRole(str, Enum):
    """Role of an account."""

    USER = "user"
    ADMIN = "admin"


class RecoveryScheme(str, Enum):
    """Kind of password recovery secret.

    TOKEN: long random string delivered as a link.
    CODE: six digit number typed into the app.
    """

    TOKEN = "token"
    CODE = "code"


class Evidence(ValueObject):
    """File attached to an incident report, base64 encoded."""

    filename: str | None = None
    base64: str | None = None


class EmailMessage(ValueObject):
    """Outbound email."""

    to: str
    subject: str
    body: str
    html: bool = False


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookup."""
    return email.strip().lower()
