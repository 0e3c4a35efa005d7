"""In-memory user repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from guard.domain.error import ConflictError
from guard.domain.model.user import User
from guard.domain.repository.user import UserRepository
from guard.domain.value import RecoveryScheme, UserId, UserStatus

_CLEARED_RESET = {"reset_secret": None, "reset_scheme": None, "reset_expires_at": None}


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    def _touch(self, user: User, **update) -> None:
        update["updated_at"] = datetime.now(timezone.utc)
        self._users[user.id] = user.model_copy(update=update)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_phone(self, phone: str) -> Optional[User]:
        """Find a user by their phone number."""
        for user in self._users.values():
            if user.phone == phone:
                return user
        return None

    async def find_all(self) -> list[User]:
        """Return all users, oldest first."""
        return sorted(self._users.values(), key=lambda u: u.created_at)

    async def save(self, user: User) -> User:
        """Save or update a user, enforcing unique email and phone."""
        for other in self._users.values():
            if other.id != user.id and (
                other.email == user.email or other.phone == user.phone
            ):
                raise ConflictError("User already exists")
        self._users[user.id] = user
        return user

    async def update_avatar(self, user_id: UserId, avatar: str | None) -> bool:
        user = self._users.get(user_id)
        if not user:
            return False
        self._touch(user, avatar=avatar)
        return True

    async def update_identity_document(self, user_id: UserId, document: str) -> bool:
        user = self._users.get(user_id)
        if not user:
            return False
        self._touch(user, identity_document=document)
        return True

    async def update_status(self, user_id: UserId, status: UserStatus) -> bool:
        user = self._users.get(user_id)
        if not user:
            return False
        self._touch(user, status=status)
        return True

    async def delete(self, user_id: UserId) -> bool:
        return self._users.pop(user_id, None) is not None

    async def store_reset_secret(
        self,
        user_id: UserId,
        scheme: RecoveryScheme,
        secret: str,
        expires_at: datetime,
        now: datetime,
    ) -> bool:
        """Store a reset secret unless an unexpired one already exists."""
        user = self._users.get(user_id)
        if not user:
            return False
        if user.reset_expires_at is not None and user.reset_expires_at > now:
            return False
        self._touch(
            user,
            reset_secret=secret,
            reset_scheme=scheme,
            reset_expires_at=expires_at,
        )
        return True

    async def discard_reset_secret(self, user_id: UserId, secret: str) -> None:
        """Clear the reset fields if the stored secret is ``secret``."""
        user = self._users.get(user_id)
        if user and user.reset_secret == secret:
            self._touch(user, **_CLEARED_RESET)

    async def consume_reset_secret(
        self,
        scheme: RecoveryScheme,
        secret: str,
        password_hash: str,
        now: datetime,
        email: str | None = None,
    ) -> Optional[UserId]:
        """Replace the password of the user holding a valid secret."""
        for user in self._users.values():
            if (
                user.reset_scheme == scheme
                and user.reset_secret == secret
                and user.reset_expires_at is not None
                and user.reset_expires_at > now
                and (email is None or user.email == email)
            ):
                self._touch(user, password_hash=password_hash, **_CLEARED_RESET)
                return user.id
        return None
