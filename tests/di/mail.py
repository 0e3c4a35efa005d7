"""Mock email providers for testing."""

from dishka import Scope, provide

from guard.adapter.smtp.sender import MockEmailSender
from guard.domain.service import EmailSender
from guard.util.di.infrastructure.mail import EmailProvider


class MockEmailProvider(EmailProvider):
    """Mock email provider that records outgoing messages."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_email_sender(self) -> EmailSender:
        """Provide mock email sender."""
        return MockEmailSender()
