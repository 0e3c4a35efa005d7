"""Password hashing domain service."""

import asyncio

import bcrypt
import logfire

from guard.domain.error import ValidationError

from .base import Service

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class PasswordService(Service):
    """Hashes and verifies passwords with bcrypt.

    bcrypt is deliberately slow, so both operations run in a worker thread
    to keep the event loop responsive.
    """

    def __init__(self, rounds: int = 10) -> None:
        """Initialize password service.

        Args:
            rounds: bcrypt cost factor
        """
        self.rounds = rounds

    async def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password

        Returns:
            bcrypt digest as text

        Raises:
            ValidationError: If the password is empty or longer than bcrypt accepts
        """
        encoded = password.encode("utf-8")
        if not encoded:
            raise ValidationError("Password must not be empty")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )

        with logfire.span("password_service.hash_password", rounds=self.rounds):
            salt = bcrypt.gensalt(rounds=self.rounds)
            digest = await asyncio.to_thread(bcrypt.hashpw, encoded, salt)
            return digest.decode("utf-8")

    async def verify_password(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored digest.

        Returns:
            True if the password matches
        """
        encoded = password.encode("utf-8")
        if not encoded or len(encoded) > MAX_PASSWORD_BYTES:
            return False

        with logfire.span("password_service.verify_password"):
            try:
                return await asyncio.to_thread(
                    bcrypt.checkpw, encoded, password_hash.encode("utf-8")
                )
            except ValueError:
                # Stored value is not a bcrypt digest
                logfire.warn("Stored password hash is malformed")
                return False
