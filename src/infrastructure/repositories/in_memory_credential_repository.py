"""In-memory credential repository.

A process-local implementation of ``ICredentialRepository`` for development
and tests. It behaves like an identity store: it enforces unique emails and
usernames, validates the password policy, hashes passwords with bcrypt, and
issues single-use, expiring one-time tokens.

One-time tokens are 32 random bytes in standard base64, so they routinely
contain ``+``, ``/`` and ``=``. Only their SHA-256 digests are kept.

State is lost when the process exits; production deployments plug in a
persistent repository instead.
"""

import asyncio
import base64
import hashlib
import secrets
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional

from passlib.context import CryptContext
from structlog import get_logger

from src.domain.entities.user import UserRecord
from src.domain.interfaces.repositories import ICredentialRepository
from src.domain.services.auth.password_policy import PasswordPolicyValidator
from src.domain.value_objects.one_time_token import RepositoryResult, TokenPurpose
from src.utils.security import create_password_context, mask_email

logger = get_logger(__name__)

INVALID_TOKEN = "Invalid token."


@dataclass
class _StoredToken:
    user_id: str
    purpose: TokenPurpose
    expires_at: datetime


class InMemoryCredentialRepository(ICredentialRepository):
    """Credential repository backed by dictionaries.

    Writes are serialised with an ``asyncio.Lock`` so concurrent registrations
    cannot claim the same email. Records are copied on the way in and out;
    callers never hold a reference to the stored record.
    """

    def __init__(
        self,
        password_policy: Optional[PasswordPolicyValidator] = None,
        password_context: Optional[CryptContext] = None,
        token_lifetime: timedelta = timedelta(hours=24),
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the repository.

        Args:
            password_policy: Rules checked on create and reset
            password_context: passlib context used to hash passwords
            token_lifetime: Validity of one-time tokens
            clock: Returns the current UTC time; injectable for tests
        """
        self._policy = password_policy or PasswordPolicyValidator()
        self._pwd_context = password_context or create_password_context()
        self._token_lifetime = token_lifetime
        self._clock = clock or (lambda: datetime.now(timezone.utc))

        self._users: Dict[str, UserRecord] = {}
        self._email_index: Dict[str, str] = {}
        self._username_index: Dict[str, str] = {}
        self._tokens: Dict[str, _StoredToken] = {}
        self._lock = asyncio.Lock()

    async def create(self, user: UserRecord, password: str) -> RepositoryResult:
        async with self._lock:
            errors = []
            if self._normalize(user.username) in self._username_index:
                errors.append(f"Username '{user.username}' is already taken.")
            if self._normalize(user.email) in self._email_index:
                errors.append(f"Email '{user.email}' is already taken.")
            errors.extend(self._policy.collect_errors(password))

            if errors:
                logger.info(
                    "User creation rejected",
                    email=mask_email(user.email),
                    error_count=len(errors),
                )
                return RepositoryResult.failed(errors)

            user.id = str(uuid.uuid4())
            user.hashed_password = self._pwd_context.hash(password)
            user.email_confirmed = False

            self._users[user.id] = replace(user)
            self._email_index[self._normalize(user.email)] = user.id
            self._username_index[self._normalize(user.username)] = user.id

        logger.info("User created", user_id=user.id, email=mask_email(user.email))
        return RepositoryResult.success()

    async def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        record = self._users.get(user_id)
        return replace(record) if record else None

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        user_id = self._email_index.get(self._normalize(email))
        if user_id is None:
            return None
        return replace(self._users[user_id])

    async def check_password(self, user: UserRecord, password: str) -> bool:
        record = self._users.get(user.id)
        if record is None or not record.hashed_password:
            return False
        return self._pwd_context.verify(password, record.hashed_password)

    async def generate_token(self, user: UserRecord, purpose: TokenPurpose) -> str:
        token = base64.b64encode(secrets.token_bytes(32)).decode("ascii")
        async with self._lock:
            now = self._clock()
            self._purge_expired(now)
            self._tokens[self._digest(token)] = _StoredToken(
                user_id=user.id,
                purpose=purpose,
                expires_at=now + self._token_lifetime,
            )
        logger.debug("One-time token issued", user_id=user.id, purpose=purpose.value)
        return token

    async def confirm_email(self, user: UserRecord, token: str) -> RepositoryResult:
        async with self._lock:
            digest = self._find_valid_token(user, token, TokenPurpose.EMAIL_CONFIRMATION)
            if digest is None:
                return RepositoryResult.failed([INVALID_TOKEN])

            del self._tokens[digest]
            self._users[user.id].email_confirmed = True
            user.email_confirmed = True

        logger.info("Email confirmed", user_id=user.id)
        return RepositoryResult.success()

    async def reset_password(
        self, user: UserRecord, token: str, new_password: str
    ) -> RepositoryResult:
        async with self._lock:
            digest = self._find_valid_token(user, token, TokenPurpose.PASSWORD_RESET)
            if digest is None:
                return RepositoryResult.failed([INVALID_TOKEN])

            errors = self._policy.collect_errors(new_password)
            if errors:
                return RepositoryResult.failed(errors)

            self._revoke_tokens(user.id, TokenPurpose.PASSWORD_RESET)
            hashed = self._pwd_context.hash(new_password)
            self._users[user.id].hashed_password = hashed
            user.hashed_password = hashed

        logger.info("Password reset", user_id=user.id)
        return RepositoryResult.success()

    def _find_valid_token(
        self, user: UserRecord, token: str, purpose: TokenPurpose
    ) -> Optional[str]:
        """Return the digest of a matching, unexpired token, or ``None``.

        Expired tokens are dropped on sight.
        """
        if user.id not in self._users or not token:
            return None

        digest = self._digest(token)
        stored = self._tokens.get(digest)
        if stored is None or stored.user_id != user.id or stored.purpose != purpose:
            return None
        if stored.expires_at <= self._clock():
            del self._tokens[digest]
            return None
        return digest

    def _purge_expired(self, now: datetime) -> None:
        expired = [d for d, t in self._tokens.items() if t.expires_at <= now]
        for digest in expired:
            del self._tokens[digest]
        if expired:
            logger.debug("Expired one-time tokens purged", count=len(expired))

    def _revoke_tokens(self, user_id: str, purpose: TokenPurpose) -> None:
        for digest in [
            d for d, t in self._tokens.items() if t.user_id == user_id and t.purpose == purpose
        ]:
            del self._tokens[digest]

    @staticmethod
    def _normalize(value: str) -> str:
        return value.strip().lower()

    @staticmethod
    def _digest(token: str) -> str:
        return hashlib.sha256(token.encode("utf-8")).hexdigest()
