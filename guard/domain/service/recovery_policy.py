"""Password recovery secret policies.

A policy bundles the three things that differ between recovery schemes:
how the secret is generated, how long it lives, and how it is presented
in the email.
"""

import secrets
from abc import ABC, abstractmethod
from datetime import timedelta
from html import escape
from urllib.parse import urlencode

from guard.domain.value import EmailMessage, RecoveryScheme
from guard.util.error import ConfigurationError

# 20 random bytes, the smallest token size we accept
MIN_TOKEN_BYTES = 20

CODE_MIN = 100000
CODE_MAX = 999999


class RecoverySecretPolicy(ABC):
    """Generator, lifetime and message format for one recovery scheme."""

    scheme: RecoveryScheme

    def __init__(self, ttl: timedelta) -> None:
        self.ttl = ttl

    @abstractmethod
    def generate(self) -> str:
        """Generate a fresh secret from a CSPRNG."""
        pass

    @abstractmethod
    def compose_message(self, to: str, secret: str) -> EmailMessage:
        """Build the email that delivers ``secret`` to ``to``."""
        pass

    @property
    def ttl_minutes(self) -> int:
        return int(self.ttl.total_seconds() // 60)


class TokenSecretPolicy(RecoverySecretPolicy):
    """Long random hex token delivered as a link.

    The link points at the API's redirect page, which opens the app via its
    URL scheme; the raw deep link is included for clients that can follow it
    directly.
    """

    scheme = RecoveryScheme.TOKEN

    def __init__(
        self,
        ttl: timedelta,
        token_bytes: int,
        reset_link_url: str,
        app_scheme: str,
    ) -> None:
        if token_bytes < MIN_TOKEN_BYTES:
            raise ConfigurationError(
                f"Reset tokens need at least {MIN_TOKEN_BYTES} random bytes, got {token_bytes}"
            )
        super().__init__(ttl)
        self.token_bytes = token_bytes
        self.reset_link_url = reset_link_url
        self.app_scheme = app_scheme

    def generate(self) -> str:
        return secrets.token_hex(self.token_bytes)

    def compose_message(self, to: str, secret: str) -> EmailMessage:
        link = escape(f"{self.reset_link_url}?{urlencode({'token': secret})}")
        deep_link = escape(f"{self.app_scheme}://reset/{secret}")
        body = (
            "You requested a password reset.<br><br>"
            f'Click <a href="{link}">here</a> to reset your password.<br><br>'
            "Or copy and paste this into your browser:<br>"
            f"{deep_link}<br><br>"
            f"This link expires in {self.ttl_minutes} minutes."
        )
        return EmailMessage(to=to, subject="Password Reset", body=body, html=True)


class CodeSecretPolicy(RecoverySecretPolicy):
    """Six digit numeric code typed into the app."""

    scheme = RecoveryScheme.CODE

    def generate(self) -> str:
        return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))

    def compose_message(self, to: str, secret: str) -> EmailMessage:
        body = (
            f"Your password reset code is {secret}.\n\n"
            f"It expires in {self.ttl_minutes} minutes. "
            "If you did not request a reset, you can ignore this email."
        )
        return EmailMessage(to=to, subject="Password Reset Code", body=body)
