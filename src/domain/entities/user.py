"""User record as owned by the credential repository."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class UserRecord:
    """Represents a user account.

    The account state is derived from the fields rather than stored:
    a record with ``email_confirmed=False`` is pending email confirmation,
    one with ``email_confirmed=True`` is active.

    Attributes:
        id: Stable identifier assigned by the repository on creation.
        email: Email address, unique across records.
        username: Login name; registration sets it to the email.
        hashed_password: Secret hash written by the repository.
        email_confirmed: Whether the email-confirmation token was consumed.
    """

    email: str
    username: str
    id: Optional[str] = None
    hashed_password: Optional[str] = None
    email_confirmed: bool = False
