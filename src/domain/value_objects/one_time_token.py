"""One-time token purposes and repository results."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class TokenPurpose(str, Enum):
    """The single action a one-time token authorizes."""

    EMAIL_CONFIRMATION = "email_confirmation"
    PASSWORD_RESET = "password_reset"


@dataclass(frozen=True)
class RepositoryResult:
    """Outcome of a mutating credential-repository call.

    ``errors`` keeps the order in which the repository reported them.
    """

    succeeded: bool
    errors: Tuple[str, ...] = ()

    @classmethod
    def success(cls) -> "RepositoryResult":
        return cls(succeeded=True)

    @classmethod
    def failed(cls, errors: Iterable[str]) -> "RepositoryResult":
        return cls(succeeded=False, errors=tuple(errors))
