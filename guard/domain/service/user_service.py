"""User domain service (account lifecycle)."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from guard.domain.error import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    PendingApprovalError,
    ValidationError,
)
from guard.domain.model import User
from guard.domain.repository import UserRepository
from guard.domain.value import UserId, UserStatus, normalize_email

from .base import Service
from .chat_service import ChatService
from .password_service import PasswordService


def _require(**fields: str | None) -> None:
    """Raise ValidationError naming every missing or blank field."""
    missing = [name for name, value in fields.items() if not value or not value.strip()]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


class UserService(Service):
    """Domain service for account lifecycle operations.

    Accounts are created pending, promoted to approved by a moderator, and
    only approved accounts can authenticate.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        chat_service: ChatService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_service: Password hashing service
            chat_service: Chat identity service
        """
        self.user_repository = user_repository
        self.password_service = password_service
        self.chat_service = chat_service

    async def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        phone: str | None,
        identity_document: str | None,
        selfie_image: str | None,
    ) -> User:
        """Register a new pending account.

        Args:
            name: Display name
            email: Email address (unique)
            password: Plaintext password
            phone: Phone number (unique)
            identity_document: Base64 identity document
            selfie_image: Base64 selfie

        Returns:
            Created user

        Raises:
            ValidationError: If any field is missing
            ConflictError: If email or phone is already registered
        """
        _require(
            name=name,
            email=email,
            password=password,
            phone=phone,
            identity_document=identity_document,
            selfie_image=selfie_image,
        )
        email = normalize_email(email)
        phone = phone.strip()

        with logfire.span("user_service.register"):
            if await self.user_repository.find_by_email(email):
                logfire.warn("Signup rejected, email already registered")
                raise ConflictError("User already exists")

            if await self.user_repository.find_by_phone(phone):
                logfire.warn("Signup rejected, phone already registered")
                raise ConflictError("User already exists")

            password_hash = await self.password_service.hash_password(password)

            now = datetime.now(timezone.utc)
            user = User(
                id=UserId(uuid4()),
                name=name.strip(),
                email=email,
                phone=phone,
                password_hash=password_hash,
                status=UserStatus.PENDING,
                identity_document=identity_document,
                selfie_image=selfie_image,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str | None, password: str | None) -> User:
        """Verify credentials and the approval gate.

        Credentials are checked first so that the pending state is only
        revealed to someone who knows the password.

        Args:
            email: Account email
            password: Plaintext password

        Returns:
            Authenticated, approved user

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
            PendingApprovalError: If the account is not approved yet
        """
        if not email or not password:
            raise InvalidCredentialsError()

        with logfire.span("user_service.authenticate"):
            user = await self.user_repository.find_by_email(normalize_email(email))
            if not user:
                logfire.warn("Login failed, no such user")
                raise InvalidCredentialsError()

            if not await self.password_service.verify_password(
                password, user.password_hash
            ):
                logfire.warn("Login failed, password mismatch", user_id=str(user.id))
                raise InvalidCredentialsError()

            if not user.is_approved:
                logfire.info("Login blocked, pending approval", user_id=str(user.id))
                raise PendingApprovalError()

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_email(self, email: str) -> User:
        """Get user by email.

        Raises:
            NotFoundError: If user not found
        """
        email = normalize_email(email)
        user = await self.user_repository.find_by_email(email)
        if not user:
            raise NotFoundError("User", email)
        return user

    async def list_users(self) -> list[User]:
        """Return every registered user."""
        with logfire.span("user_service.list_users"):
            users = await self.user_repository.find_all()
            logfire.info("Users listed", count=len(users))
            return users

    async def update_avatar(self, user_id: UserId, avatar: str | None) -> None:
        """Overwrite the user's avatar reference.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.update_avatar", user_id=str(user_id)):
            if not await self.user_repository.update_avatar(user_id, avatar):
                raise NotFoundError("User", str(user_id))
            logfire.info("Avatar updated", user_id=str(user_id))

    async def submit_identity_document(
        self, user_id: UserId, identity_document: str | None
    ) -> None:
        """Replace the identity document a moderator reviews.

        The moderation status is left as it is.

        Raises:
            ValidationError: If the document is empty
            NotFoundError: If user not found
        """
        _require(identity_document=identity_document)

        with logfire.span("user_service.submit_identity_document", user_id=str(user_id)):
            if not await self.user_repository.update_identity_document(
                user_id, identity_document
            ):
                raise NotFoundError("User", str(user_id))
            logfire.info("Identity document submitted", user_id=str(user_id))

    async def approve(self, user_id: UserId) -> None:
        """Promote a pending account to approved.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.approve", user_id=str(user_id)):
            if not await self.user_repository.update_status(
                user_id, UserStatus.APPROVED
            ):
                raise NotFoundError("User", str(user_id))
            logfire.info("User approved", user_id=str(user_id))

    async def delete(self, user_id: UserId) -> bool:
        """Delete the account and its chat identity.

        The local record is removed first. A failed chat delete does not
        undo it; the caller gets False and must report a partial failure.

        Args:
            user_id: User ID

        Returns:
            True if the chat identity was deleted as well

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.delete", user_id=str(user_id)):
            if not await self.user_repository.delete(user_id):
                logfire.warn("Delete failed, user not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            logfire.info("User deleted locally", user_id=str(user_id))
            return await self.chat_service.revoke_identity(str(user_id))
