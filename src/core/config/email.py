"""Email configuration settings for the Warden application.

This module defines the SMTP parameters used by the email notifier and the
dispatch mode that decides whether workflow operations wait for delivery.
"""

from typing import Literal, Optional

from pydantic import EmailStr, Field, SecretStr
from pydantic_settings import BaseSettings


class EmailSettings(BaseSettings):
    """Email configuration settings with secure defaults and validation.

    Attributes:
        EMAIL_SMTP_HOST: SMTP server hostname
        EMAIL_SMTP_PORT: SMTP server port (587 for STARTTLS, 465 for SSL)
        EMAIL_SMTP_USERNAME: SMTP authentication username
        EMAIL_SMTP_PASSWORD: SMTP authentication password (SecretStr)
        EMAIL_SMTP_USE_TLS: Enable STARTTLS
        EMAIL_SMTP_USE_SSL: Enable implicit SSL (alternative to STARTTLS)
        EMAIL_FROM_EMAIL: Sender address
        EMAIL_FROM_NAME: Sender display name
        EMAIL_TEST_MODE: Log emails instead of sending them
        NOTIFICATION_DISPATCH_MODE: ``await`` delivers inline, ``background``
            hands delivery to a detached task
    """

    EMAIL_SMTP_HOST: str = Field(default="localhost", description="SMTP server hostname")
    EMAIL_SMTP_PORT: int = Field(default=587, ge=1, le=65535)
    EMAIL_SMTP_USERNAME: Optional[str] = Field(default=None)
    EMAIL_SMTP_PASSWORD: Optional[SecretStr] = Field(default=None)
    EMAIL_SMTP_USE_TLS: bool = Field(default=True)
    EMAIL_SMTP_USE_SSL: bool = Field(default=False)

    EMAIL_FROM_EMAIL: EmailStr = Field(default="noreply@example.com")
    EMAIL_FROM_NAME: str = Field(default="Warden")

    EMAIL_TEST_MODE: bool = Field(
        default=False,
        description="Enable test mode (emails logged instead of sent)",
    )
    NOTIFICATION_DISPATCH_MODE: Literal["await", "background"] = "await"

    def validate_smtp_config(self) -> None:
        """Validate SMTP configuration for production use.

        Raises:
            ValueError: If SMTP configuration is invalid or insecure
        """
        if self.EMAIL_TEST_MODE:
            return

        if self.EMAIL_SMTP_USE_TLS and self.EMAIL_SMTP_USE_SSL:
            raise ValueError(
                "Cannot enable both EMAIL_SMTP_USE_TLS and EMAIL_SMTP_USE_SSL simultaneously"
            )
