"""Email infrastructure providers."""

from dishka import Scope, provide

from guard.adapter.smtp.sender import SmtpEmailSender
from guard.config import EmailSettings
from guard.domain.service import EmailSender
from guard.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider using SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, email_settings: EmailSettings) -> EmailSender:
        """Provide SMTP email sender."""
        return SmtpEmailSender(
            host=email_settings.smtp_host,
            port=email_settings.smtp_port,
            username=email_settings.username,
            password=email_settings.password,
            sender=email_settings.sender,
            use_starttls=email_settings.use_starttls,
            timeout=email_settings.timeout_seconds,
        )
