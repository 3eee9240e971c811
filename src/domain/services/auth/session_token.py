from datetime import datetime, timezone
from typing import Optional

from jwt import PyJWTError
from jwt import decode as jwt_decode
from jwt import encode as jwt_encode
from structlog import get_logger

from src.core.exceptions import ConfigurationError, SessionTokenError
from src.domain.interfaces.services import ISessionTokenIssuer
from src.domain.value_objects.session_token import (
    MIN_SIGNING_KEY_LENGTH,
    SESSION_TOKEN_LIFETIME,
    SessionClaims,
    SessionToken,
    SigningConfig,
    TokenId,
)

logger = get_logger(__name__)


class SessionTokenIssuer(ISessionTokenIssuer):
    """Service for minting and verifying stateless session tokens.

    Tokens are JWTs signed with HMAC-SHA-256. There is no server-side session
    store: verification is purely cryptographic, and the claims are the only
    source of identity once a token has been issued.

    Attributes:
        ALGORITHM (str): JWS algorithm used for signing.
    """

    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = (
        "exp",
        "iat",
        "iss",
        "aud",
        SessionClaims.SUBJECT_CLAIM,
        SessionClaims.EMAIL_CLAIM,
    )

    def __init__(self, config: SigningConfig):
        """Validate the signing configuration.

        Raises:
            ConfigurationError: If the key is absent or too short, or if the
                issuer or audience is empty.
        """
        if not config.key:
            raise ConfigurationError("Session token signing key is not configured")
        if len(config.key.encode("utf-8")) < MIN_SIGNING_KEY_LENGTH:
            raise ConfigurationError(
                f"Session token signing key must be at least {MIN_SIGNING_KEY_LENGTH} bytes"
            )
        if not config.issuer or not config.audience:
            raise ConfigurationError("Session token issuer and audience must be configured")
        self._config = config

    def issue(self, claims: SessionClaims, now: Optional[datetime] = None) -> SessionToken:
        """Create a signed session token.

        Args:
            claims: Identity to embed.
            now: Issuance time, defaults to the current UTC time. Naive values
                are treated as UTC.

        Returns:
            SessionToken: The encoded token, expiring 30 days after issuance.
        """
        issued_at = now or datetime.now(timezone.utc)
        if issued_at.tzinfo is None:
            issued_at = issued_at.replace(tzinfo=timezone.utc)
        # JWT timestamps have one-second resolution
        issued_at = issued_at.replace(microsecond=0)
        expires_at = issued_at + SESSION_TOKEN_LIFETIME

        token_id = TokenId.generate()
        payload = {
            SessionClaims.EMAIL_CLAIM: claims.email,
            SessionClaims.SUBJECT_CLAIM: claims.subject_id,
            "iss": self._config.issuer,
            "aud": self._config.audience,
            "iat": issued_at,
            "exp": expires_at,
            "jti": str(token_id),
        }
        token = jwt_encode(payload, self._config.key, algorithm=self.ALGORITHM)
        logger.debug(
            "Session token issued",
            subject_id=claims.subject_id,
            jti=token_id.mask_for_logging(),
            expires_at=expires_at.isoformat(),
        )
        return SessionToken(
            token=token,
            claims=claims,
            issued_at=issued_at,
            expires_at=expires_at,
        )

    def verify(self, token: str) -> SessionClaims:
        """Verify a session token and extract its claims.

        Raises:
            SessionTokenError: If the token is malformed, tampered with,
                expired, or was issued for another issuer or audience.
        """
        try:
            payload = jwt_decode(
                token,
                self._config.key,
                algorithms=[self.ALGORITHM],
                issuer=self._config.issuer,
                audience=self._config.audience,
                options={"require": list(self.REQUIRED_CLAIMS)},
            )
        except PyJWTError as e:
            logger.warning("Session token rejected", error=str(e))
            raise SessionTokenError() from e

        return SessionClaims(
            email=payload[SessionClaims.EMAIL_CLAIM],
            subject_id=str(payload[SessionClaims.SUBJECT_CLAIM]),
        )
