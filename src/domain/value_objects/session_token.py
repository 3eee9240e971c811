"""Session token value objects.

These value objects give session tokens a fixed, typed claim schema and an
explicit signing configuration, instead of assembling claims dynamically.
"""

import base64
import secrets
import string
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import ClassVar

SESSION_TOKEN_LIFETIME = timedelta(days=30)
MIN_SIGNING_KEY_LENGTH = 32


@dataclass(frozen=True)
class TokenId:
    """Value object for the JWT identifier (``jti`` claim).

    256 bits of entropy encoded as 43 URL-safe base64 characters.
    """

    value: str

    TOKEN_ID_LENGTH: ClassVar[int] = 43
    VALID_CHARS: ClassVar[str] = string.ascii_letters + string.digits + "-_"

    def __post_init__(self):
        if not self.value:
            raise ValueError("Token ID cannot be empty")
        if len(self.value) != self.TOKEN_ID_LENGTH:
            raise ValueError(f"Token ID must be exactly {self.TOKEN_ID_LENGTH} characters")
        if not all(c in self.VALID_CHARS for c in self.value):
            raise ValueError("Token ID contains invalid characters")

    @classmethod
    def generate(cls) -> "TokenId":
        raw_bytes = secrets.token_bytes(32)
        return cls(base64.urlsafe_b64encode(raw_bytes).rstrip(b"=").decode("ascii"))

    def mask_for_logging(self) -> str:
        return self.value[:4] + "*" * (len(self.value) - 4)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SigningConfig:
    """Symmetric signing configuration for session tokens.

    Attributes:
        key: HMAC-SHA-256 secret.
        issuer: Value of the ``iss`` claim.
        audience: Value of the ``aud`` claim.
    """

    key: str = field(repr=False)
    issuer: str
    audience: str


@dataclass(frozen=True)
class SessionClaims:
    """Identity carried by a session token."""

    email: str
    subject_id: str

    EMAIL_CLAIM: ClassVar[str] = "Email"
    SUBJECT_CLAIM: ClassVar[str] = "sub"


@dataclass(frozen=True)
class SessionToken:
    """A signed bearer token and its validity window.

    ``expires_at`` is always ``issued_at`` plus 30 days.
    """

    token: str = field(repr=False)
    claims: SessionClaims
    issued_at: datetime
    expires_at: datetime
