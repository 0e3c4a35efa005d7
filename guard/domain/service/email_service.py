"""Outbound email port."""

from guard.domain.value import EmailMessage


class EmailSender:
    """Generic email transport interface."""

    async def send(self, message: EmailMessage) -> None:
        """Deliver a message and return once the transport accepted it.

        Args:
            message: Message to send

        Raises:
            UpstreamError: If the transport rejects the message or times out
        """
        raise NotImplementedError
