"""SMTP email adapter."""

from .sender import MockEmailSender, SmtpEmailSender

__all__ = ["SmtpEmailSender", "MockEmailSender"]
