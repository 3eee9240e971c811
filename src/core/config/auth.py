"""Authentication settings: session-token signing and credential policy.
"""

import logging

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings

from src.domain.value_objects.session_token import MIN_SIGNING_KEY_LENGTH

logger = logging.getLogger(__name__)


class AuthSettings(BaseSettings):
    """Defines settings for session-token signing, password hashing and the
    password policy enforced by the reference credential repository.

    Security Note:
        - JWT_SIGNING_KEY is a symmetric HMAC-SHA-256 secret. It must be at least
          32 characters, stored securely and never logged.
        - Session tokens are valid for a fixed 30 days; rotating the key
          invalidates every outstanding token.
    """

    # Session token signing
    JWT_SIGNING_KEY: SecretStr = SecretStr("")
    JWT_ISSUER: str = "http://localhost:8000"
    JWT_AUDIENCE: str = "warden:api"

    # Credential repository
    BCRYPT_WORK_FACTOR: int = Field(default=12, ge=4, le=31)
    ONE_TIME_TOKEN_EXPIRE_HOURS: int = Field(default=24, ge=1, le=24 * 30)

    # Password policy
    PASSWORD_MIN_LENGTH: int = Field(default=3, ge=1)
    PASSWORD_REQUIRE_DIGIT: bool = True
    PASSWORD_REQUIRE_UPPERCASE: bool = True
    PASSWORD_REQUIRE_LOWERCASE: bool = False
    PASSWORD_REQUIRE_NON_ALPHANUMERIC: bool = True

    @model_validator(mode="after")
    def _validate_signing_key(self) -> "AuthSettings":
        """Rejects a missing or short signing key.

        Raises:
            ValueError: If the key is absent or shorter than 32 characters.
        """
        key = self.JWT_SIGNING_KEY.get_secret_value()
        if not key:
            error_msg = "JWT_SIGNING_KEY is not set. Session tokens cannot be signed."
            logger.error(error_msg)
            raise ValueError(error_msg)
        if len(key) < MIN_SIGNING_KEY_LENGTH:
            error_msg = f"JWT_SIGNING_KEY must be at least {MIN_SIGNING_KEY_LENGTH} characters."
            logger.error(error_msg)
            raise ValueError(error_msg)
        return self
