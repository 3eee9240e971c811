"""Repository interfaces for abstracting credential storage in the domain layer.

The credential repository is an external collaborator: it owns user records,
password hashes and one-time tokens. The identity workflow only talks to it
through this port; concrete adapters live in the ``infrastructure`` layer.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.user import UserRecord
from src.domain.value_objects.one_time_token import RepositoryResult, TokenPurpose


class ICredentialRepository(ABC):
    """An interface defining the contract for credential persistence operations.

    Implementations are responsible for every uniqueness and consistency
    guarantee (e.g. two concurrent registrations claiming the same email) and
    for expiring and invalidating one-time tokens.
    """

    @abstractmethod
    async def create(self, user: UserRecord, password: str) -> RepositoryResult:
        """Stores a new user with the given password.

        Args:
            user: The record to create. The repository assigns ``user.id``.
            password: Plain-text password to hash and store.

        Returns:
            A ``RepositoryResult``; on failure ``errors`` lists every violated
            rule (duplicate email, password policy, ...) in evaluation order.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Retrieves a user by their stable identifier, or ``None``."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Retrieves a user by email address (case-insensitively), or ``None``."""
        raise NotImplementedError

    @abstractmethod
    async def check_password(self, user: UserRecord, password: str) -> bool:
        """Verifies a plain-text password against the user's stored hash."""
        raise NotImplementedError

    @abstractmethod
    async def generate_token(self, user: UserRecord, purpose: TokenPurpose) -> str:
        """Issues a one-time token bound to ``user`` and ``purpose``.

        Returns:
            The raw token text. It may contain characters that are not URL-safe.
        """
        raise NotImplementedError

    @abstractmethod
    async def confirm_email(self, user: UserRecord, token: str) -> RepositoryResult:
        """Consumes an email-confirmation token and marks the email confirmed."""
        raise NotImplementedError

    @abstractmethod
    async def reset_password(
        self, user: UserRecord, token: str, new_password: str
    ) -> RepositoryResult:
        """Consumes a password-reset token and replaces the stored secret."""
        raise NotImplementedError
