"""SMTP email sender.

smtplib is blocking, so delivery runs in a worker thread.
"""

import asyncio
import smtplib
from email.mime.text import MIMEText

import logfire

from guard.domain.error import UpstreamError
from guard.domain.service.email_service import EmailSender
from guard.domain.value import EmailMessage

SERVICE_NAME = "email"


class SmtpEmailSender(EmailSender):
    """Sends mail through an SMTP relay (Gmail by default)."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str | None,
        password: str | None,
        sender: str | None = None,
        use_starttls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        """Initialize SMTP sender.

        Args:
            host: SMTP server host
            port: SMTP server port
            username: Login user; no login when unset
            password: Login password (app password for Gmail)
            sender: From address, defaults to ``username``
            use_starttls: Upgrade the connection with STARTTLS
            timeout: Socket timeout in seconds
        """
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender or username
        self.use_starttls = use_starttls
        self.timeout = timeout

        if not self.sender:
            logfire.warn("Email sender address not configured, sending will fail")

    def _build(self, message: EmailMessage) -> MIMEText:
        msg = MIMEText(message.body, "html" if message.html else "plain", "utf-8")
        msg["From"] = self.sender or ""
        msg["To"] = message.to
        msg["Subject"] = message.subject
        return msg

    def _deliver(self, message: EmailMessage) -> None:
        msg = self._build(message)
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_starttls:
                server.starttls()
            if self.username and self.password:
                server.login(self.username, self.password)
            server.send_message(msg)

    async def send(self, message: EmailMessage) -> None:
        """Send the message.

        Raises:
            UpstreamError: If no sender is configured or delivery fails
        """
        if not self.sender:
            raise UpstreamError(SERVICE_NAME, "sender address not configured")

        with logfire.span("smtp.send", subject=message.subject):
            try:
                await asyncio.to_thread(self._deliver, message)
            except (smtplib.SMTPException, OSError) as e:
                logfire.error("Email delivery failed", error=str(e))
                raise UpstreamError(SERVICE_NAME, str(e)) from e

            logfire.info("Email sent", subject=message.subject)


class MockEmailSender(EmailSender):
    """Mock email sender for testing.

    Records every message in ``outbox``. Set ``fail`` to simulate an outage.
    """

    def __init__(self) -> None:
        self.outbox: list[EmailMessage] = []
        self.fail = False

    async def send(self, message: EmailMessage) -> None:
        if self.fail:
            raise UpstreamError(SERVICE_NAME, "mock delivery failure")
        self.outbox.append(message)
