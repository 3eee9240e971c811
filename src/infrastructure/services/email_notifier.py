"""SMTP notifier built on fastapi-mail.

In test mode messages are logged instead of sent, so development servers and
the test suite never reach for an SMTP server.
"""

from typing import Optional

import structlog
from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType

from src.core.config.email import EmailSettings
from src.core.exceptions import EmailServiceError
from src.domain.interfaces.notifications import INotifier
from src.utils.security import mask_email

logger = structlog.get_logger(__name__)


class EmailNotifier(INotifier):
    """Delivers workflow emails over SMTP.

    Attributes:
        fastmail: FastMail client, ``None`` in test mode
    """

    def __init__(self, email_settings: EmailSettings):
        self._settings = email_settings
        self._test_mode = email_settings.EMAIL_TEST_MODE
        self.fastmail: Optional[FastMail] = None

        if self._test_mode:
            logger.info("Email notifier in test mode - emails will be logged")
        else:
            self._setup_smtp_client()

    @property
    def test_mode(self) -> bool:
        return self._test_mode

    def _setup_smtp_client(self) -> None:
        s = self._settings
        try:
            s.validate_smtp_config()
            config = ConnectionConfig(
                MAIL_USERNAME=s.EMAIL_SMTP_USERNAME or "",
                MAIL_PASSWORD=s.EMAIL_SMTP_PASSWORD.get_secret_value() if s.EMAIL_SMTP_PASSWORD else "",
                MAIL_FROM=s.EMAIL_FROM_EMAIL,
                MAIL_PORT=s.EMAIL_SMTP_PORT,
                MAIL_SERVER=s.EMAIL_SMTP_HOST,
                MAIL_FROM_NAME=s.EMAIL_FROM_NAME,
                MAIL_STARTTLS=s.EMAIL_SMTP_USE_TLS,
                MAIL_SSL_TLS=s.EMAIL_SMTP_USE_SSL,
                USE_CREDENTIALS=bool(s.EMAIL_SMTP_USERNAME and s.EMAIL_SMTP_PASSWORD),
                VALIDATE_CERTS=True,
            )
        except ValueError as e:
            logger.error("Failed to configure FastMail", error=str(e))
            raise EmailServiceError(f"Failed to configure email service: {e}") from e

        self.fastmail = FastMail(config)
        logger.info("FastMail configured", smtp_host=s.EMAIL_SMTP_HOST, smtp_port=s.EMAIL_SMTP_PORT)

    async def send_email(self, to_email: str, subject: str, html_content: str) -> None:
        if self._test_mode:
            logger.info(
                "Email sent in test mode",
                to_email=mask_email(to_email),
                subject=subject,
                html_length=len(html_content),
            )
            return

        if self.fastmail is None:
            raise EmailServiceError("FastMail not configured for production mode")

        message = MessageSchema(
            subject=subject,
            recipients=[to_email],
            body=html_content,
            subtype=MessageType.html,
        )

        try:
            await self.fastmail.send_message(message)
        except Exception as e:
            logger.error(
                "Failed to send email",
                to_email=mask_email(to_email),
                subject=subject,
                error=str(e),
            )
            raise EmailServiceError(f"Failed to send email: {e}") from e

        logger.info("Email sent successfully", to_email=mask_email(to_email), subject=subject)
