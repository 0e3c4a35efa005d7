"""User aggregate root.

Users register with an identity document and a selfie, wait for a moderator
to approve them, and can then log in and use the chat.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from guard.domain.model.common import DomainModel
from guard.domain.value import RecoveryScheme, UserId, UserRole, UserStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(DomainModel):
    """User aggregate root.

    ``password_hash`` is a bcrypt digest. ``identity_document`` and
    ``selfie_image`` are opaque base64 blobs supplied at signup.

    The reset fields describe at most one active recovery secret; they are
    set and cleared together.
    """

    id: UserId
    name: str
    email: str
    phone: str
    password_hash: str
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.PENDING
    avatar: Optional[str] = None
    identity_document: Optional[str] = None
    selfie_image: Optional[str] = None
    reset_secret: Optional[str] = None
    reset_scheme: Optional[RecoveryScheme] = None
    reset_expires_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @property
    def is_approved(self) -> bool:
        return self.status == UserStatus.APPROVED

    def has_active_reset_secret(self, now: datetime) -> bool:
        """Whether a reset secret exists and has not expired yet."""
        return (
            self.reset_secret is not None
            and self.reset_expires_at is not None
            and self.reset_expires_at > now
        )
