"""
Outbound email transport.

Wraps an SMTP session behind a small async interface. smtplib is
blocking, so each send runs in a worker thread and the event loop only
awaits the result.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Protocol, runtime_checkable

from .config import Settings
from .exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class EmailDeliveryError(ExternalServiceError):
    """Raised when the SMTP server rejects or fails to accept a message."""

    def __init__(self, recipient: str, reason: str):
        super().__init__(
            f"Failed to send email to {recipient}",
            service="smtp",
            code="EMAIL_DELIVERY_FAILED",
            details={"recipient": recipient, "reason": reason},
        )


@runtime_checkable
class IEmailSender(Protocol):
    """Interface for sending plain-text email."""

    async def send_email(self, to: str, subject: str, text: str) -> None:
        """
        Send a plain-text email.

        Raises:
            EmailDeliveryError: If the message could not be handed off
        """
        ...


class EmailService(IEmailSender):
    """SMTP implementation of IEmailSender."""

    def __init__(self, settings: Settings):
        self._host = settings.smtp_host
        self._port = settings.smtp_port
        self._username = settings.smtp_username
        self._password = settings.smtp_password
        self._use_tls = settings.smtp_use_tls
        self._sender = settings.email_from

    def _build_message(self, to: str, subject: str, text: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self._sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content(text)
        return message

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(host=self._host, port=self._port, timeout=30) as conn:
            if self._use_tls:
                conn.starttls()
            if self._username:
                conn.login(self._username, self._password)
            conn.send_message(message)

    async def send_email(self, to: str, subject: str, text: str) -> None:
        message = self._build_message(to, subject, text)
        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as e:
            logger.warning(f"Error sending email to {to}: {e}")
            raise EmailDeliveryError(to, str(e)) from e
        logger.info(f"Email sent to {to}: {subject}")
