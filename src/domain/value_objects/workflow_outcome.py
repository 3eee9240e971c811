"""The uniform envelope returned by every identity workflow operation."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional, Tuple

from src.core.exceptions import WardenError


@dataclass(frozen=True)
class WorkflowOutcome:
    """Success/failure envelope.

    On success ``message`` describes the result (for login it is the session
    token itself and ``expiry`` is set). On failure ``message`` is always
    human-readable and ``errors`` optionally enumerates the causes in the order
    the credential repository reported them.
    """

    success: bool
    message: str
    errors: Tuple[str, ...] = ()
    expiry: Optional[datetime] = None

    @classmethod
    def succeeded(cls, message: str, expiry: Optional[datetime] = None) -> "WorkflowOutcome":
        return cls(success=True, message=message, expiry=expiry)

    @classmethod
    def failed(cls, message: str, errors: Iterable[str] = ()) -> "WorkflowOutcome":
        return cls(success=False, message=message, errors=tuple(errors))

    @classmethod
    def from_error(cls, error: WardenError) -> "WorkflowOutcome":
        """Convert a domain error into a failure outcome.

        The error's ``errors`` become the outcome's errors.
        """
        return cls.failed(error.message, error.errors)
