"""Password recovery domain service."""

from datetime import datetime, timezone

import logfire

from guard.domain.error import (
    InvalidOrExpiredError,
    NotFoundError,
    RateLimitedError,
    UpstreamError,
    ValidationError,
)
from guard.domain.repository import UserRepository
from guard.domain.value import RecoveryScheme, UserId, normalize_email

from .base import Service
from .email_service import EmailSender
from .password_service import PasswordService
from .recovery_policy import RecoverySecretPolicy


class RecoveryService(Service):
    """Issues and consumes single-use, time-bounded password reset secrets.

    A user holds at most one secret. A new request is refused while the
    previous secret is still valid, and a secret is cleared in the same
    update that replaces the password.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        email_sender: EmailSender,
        policies: dict[RecoveryScheme, RecoverySecretPolicy],
    ) -> None:
        """Initialize recovery service.

        Args:
            user_repository: User repository
            password_service: Password hashing service
            email_sender: Outbound email transport
            policies: Secret policy per recovery scheme
        """
        self.user_repository = user_repository
        self.password_service = password_service
        self.email_sender = email_sender
        self.policies = policies

    def _policy(self, scheme: RecoveryScheme) -> RecoverySecretPolicy:
        policy = self.policies.get(scheme)
        if not policy:
            raise ValueError(f"Unsupported recovery scheme: {scheme}")
        return policy

    async def request_reset(self, email: str, scheme: RecoveryScheme) -> datetime:
        """Issue a reset secret and email it to the user.

        Steps:
        1. Look up the user by email
        2. Refuse if an unexpired secret exists
        3. Generate and store a new secret (conditional write)
        4. Send it; if sending fails, discard the secret again

        Args:
            email: Account email
            scheme: Recovery scheme to use

        Returns:
            Expiry time of the issued secret

        Raises:
            NotFoundError: If no user has this email
            RateLimitedError: If a previous secret has not expired yet
            UpstreamError: If the email could not be sent
        """
        policy = self._policy(scheme)
        email = normalize_email(email)

        with logfire.span("recovery_service.request_reset", scheme=scheme.value):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("Reset requested for unknown email")
                raise NotFoundError("User", email)

            now = datetime.now(timezone.utc)
            if user.has_active_reset_secret(now):
                logfire.warn("Reset already in progress", user_id=str(user.id))
                raise RateLimitedError()

            secret = policy.generate()
            expires_at = now + policy.ttl

            # Guards against a concurrent request that stored a secret
            # between the read above and this write
            stored = await self.user_repository.store_reset_secret(
                user.id, scheme, secret, expires_at, now
            )
            if not stored:
                logfire.warn("Reset secret already stored", user_id=str(user.id))
                raise RateLimitedError()

            try:
                await self.email_sender.send(policy.compose_message(user.email, secret))
            except UpstreamError as e:
                await self.user_repository.discard_reset_secret(user.id, secret)
                logfire.error(
                    "Reset email failed, secret discarded",
                    user_id=str(user.id),
                    error=str(e),
                )
                raise

            logfire.info(
                "Reset secret issued",
                user_id=str(user.id),
                scheme=scheme.value,
                expires_at=expires_at.isoformat(),
            )
            return expires_at

    async def complete_reset(
        self,
        scheme: RecoveryScheme,
        secret: str,
        new_password: str,
        email: str | None = None,
    ) -> UserId:
        """Consume a reset secret and set a new password.

        Token scheme: the token identifies the user. Code scheme: the email
        identifies the user and the code is the secret.

        Args:
            scheme: Recovery scheme of the secret
            secret: Token or code exactly as issued
            new_password: New plaintext password
            email: Account email (required for the code scheme)

        Returns:
            ID of the user whose password was reset

        Raises:
            ValidationError: If the new password or a required field is missing
            InvalidOrExpiredError: If nothing matches or the secret expired
        """
        if not new_password or not new_password.strip():
            raise ValidationError("New password is required")
        if scheme == RecoveryScheme.CODE and not email:
            raise ValidationError("Email is required to verify a reset code")

        with logfire.span("recovery_service.complete_reset", scheme=scheme.value):
            password_hash = await self.password_service.hash_password(new_password)

            user_id = await self.user_repository.consume_reset_secret(
                scheme,
                secret,
                password_hash,
                datetime.now(timezone.utc),
                email=normalize_email(email) if email else None,
            )
            if user_id is None:
                logfire.warn("Reset rejected", scheme=scheme.value)
                raise InvalidOrExpiredError()

            logfire.info("Password reset", user_id=str(user_id))
            return user_id
