"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from guard.domain.model.user import User
from guard.domain.value import RecoveryScheme, UserId, UserStatus


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.

    The reset secret methods are conditional single-statement updates so
    that concurrent requests cannot both issue or both consume a secret.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their (normalized) email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_phone(self, phone: str) -> Optional[User]:
        """Find a user by their phone number.

        Args:
            phone: The user's phone number

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[User]:
        """Return all users, oldest first."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            ConflictError: If email or phone collides with another user
        """
        pass

    @abstractmethod
    async def update_avatar(self, user_id: UserId, avatar: str | None) -> bool:
        """Overwrite the avatar reference.

        Returns:
            True if the user exists
        """
        pass

    @abstractmethod
    async def update_identity_document(self, user_id: UserId, document: str) -> bool:
        """Overwrite the stored identity document.

        Returns:
            True if the user exists
        """
        pass

    @abstractmethod
    async def update_status(self, user_id: UserId, status: UserStatus) -> bool:
        """Set the moderation status.

        Returns:
            True if the user exists
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Returns:
            True if a user was deleted
        """
        pass

    @abstractmethod
    async def store_reset_secret(
        self,
        user_id: UserId,
        scheme: RecoveryScheme,
        secret: str,
        expires_at: datetime,
        now: datetime,
    ) -> bool:
        """Store a reset secret unless an unexpired one already exists.

        Args:
            user_id: Target user
            scheme: Scheme the secret was generated for
            secret: The secret value
            expires_at: When the secret stops being valid
            now: Current time, used for the "no active secret" check

        Returns:
            True if the secret was written, False if the user is missing or
            still holds an unexpired secret
        """
        pass

    @abstractmethod
    async def discard_reset_secret(self, user_id: UserId, secret: str) -> None:
        """Clear the reset fields if the stored secret is ``secret``.

        Used to undo an issue whose delivery failed without touching a
        secret written by someone else in the meantime.
        """
        pass

    @abstractmethod
    async def consume_reset_secret(
        self,
        scheme: RecoveryScheme,
        secret: str,
        password_hash: str,
        now: datetime,
        email: str | None = None,
    ) -> Optional[UserId]:
        """Replace the password of the user holding a valid secret.

        Matches on exact secret, scheme, expiry strictly after ``now`` and,
        when given, email. On a match the password hash is overwritten and
        the reset fields are cleared in the same update.

        Returns:
            ID of the updated user, or None if nothing matched
        """
        pass
