"""JWT session token domain service."""

import logfire

from guard.config import AuthSettings
from guard.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str) -> str:
        """Create a short-lived session token for a user.

        Args:
            user_id: User ID

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, self.auth_settings)
            logfire.info(
                "Session token created",
                user_id=user_id,
                expiry_minutes=self.auth_settings.jwt_expiry_minutes,
            )
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("Session token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.warn("Session token verification failed", error=str(e))
                raise
