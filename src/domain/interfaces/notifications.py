"""Notifier interface for outbound messages."""

from abc import ABC, abstractmethod


class INotifier(ABC):
    """Sends a message to a recipient.

    Delivery happens outside the service (SMTP, provider API); implementations
    raise ``EmailServiceError`` when delivery fails so callers can observe it.
    """

    @abstractmethod
    async def send_email(self, to_email: str, subject: str, html_content: str) -> None:
        """Send an HTML email.

        Args:
            to_email: Recipient address
            subject: Subject line
            html_content: HTML body

        Raises:
            EmailServiceError: If delivery fails
        """
        raise NotImplementedError
