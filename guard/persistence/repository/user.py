"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from guard.domain.error import ConflictError
from guard.domain.model import User
from guard.domain.repository import UserRepository
from guard.domain.value import RecoveryScheme, UserId, UserStatus
from guard.persistence.mappers import row_to_user, user_to_dict
from guard.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *criteria) -> Optional[User]:
        stmt = select(users_table).where(*criteria)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Normalized email to search for

        Returns:
            User if found, None otherwise
        """
        return await self._find_one(users_table.c.email == email)

    async def find_by_phone(self, phone: str) -> Optional[User]:
        """Find a user by their phone number."""
        return await self._find_one(users_table.c.phone == phone)

    async def find_all(self) -> list[User]:
        """Return all users, oldest first."""
        stmt = select(users_table).order_by(users_table.c.created_at.asc())
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            ConflictError: If the email or phone unique constraint fails
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        try:
            # Savepoint so a constraint failure leaves the session usable
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError("User already exists") from e

        return user

    async def _update(self, user_id: UserId, **values) -> bool:
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(**values, updated_at=func.now())
            .returning(users_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def update_avatar(self, user_id: UserId, avatar: str | None) -> bool:
        """Overwrite the avatar reference."""
        return await self._update(user_id, avatar=avatar)

    async def update_identity_document(self, user_id: UserId, document: str) -> bool:
        """Overwrite the stored identity document."""
        return await self._update(user_id, identity_document=document)

    async def update_status(self, user_id: UserId, status: UserStatus) -> bool:
        """Set the moderation status."""
        return await self._update(user_id, status=status.value)

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        stmt = (
            delete(users_table)
            .where(users_table.c.id == user_id)
            .returning(users_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def store_reset_secret(
        self,
        user_id: UserId,
        scheme: RecoveryScheme,
        secret: str,
        expires_at: datetime,
        now: datetime,
    ) -> bool:
        """Store a reset secret unless an unexpired one already exists.

        The "no active secret" check is part of the UPDATE, so two
        concurrent requests cannot both succeed.
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .where(
                or_(
                    users_table.c.reset_expires_at.is_(None),
                    users_table.c.reset_expires_at <= now,
                )
            )
            .values(
                reset_secret=secret,
                reset_scheme=scheme.value,
                reset_expires_at=expires_at,
                updated_at=func.now(),
            )
            .returning(users_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def discard_reset_secret(self, user_id: UserId, secret: str) -> None:
        """Clear the reset fields if the stored secret is ``secret``."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .where(users_table.c.reset_secret == secret)
            .values(
                reset_secret=None,
                reset_scheme=None,
                reset_expires_at=None,
                updated_at=func.now(),
            )
        )
        await self.session.execute(stmt)

    async def consume_reset_secret(
        self,
        scheme: RecoveryScheme,
        secret: str,
        password_hash: str,
        now: datetime,
        email: str | None = None,
    ) -> Optional[UserId]:
        """Replace the password of the user holding a valid secret.

        Matching and clearing happen in one UPDATE, so a secret can be
        consumed at most once.
        """
        stmt = (
            users_table.update()
            .where(users_table.c.reset_scheme == scheme.value)
            .where(users_table.c.reset_secret == secret)
            .where(users_table.c.reset_expires_at > now)
        )
        if email is not None:
            stmt = stmt.where(users_table.c.email == email)

        stmt = stmt.values(
            password_hash=password_hash,
            reset_secret=None,
            reset_scheme=None,
            reset_expires_at=None,
            updated_at=func.now(),
        ).returning(users_table.c.id)

        result = await self.session.execute(stmt)
        row = result.first()
        return UserId(row.id) if row else None
