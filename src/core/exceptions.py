from __future__ import annotations

"""Centralized, structured exception hierarchy for Warden.

Every error carries a human-readable ``message`` and a machine-readable
``code``. Workflow errors additionally carry an ordered ``errors`` sequence so
that multi-cause failures reported by the credential repository can be
surfaced to callers unchanged.

The identity workflow converts these exceptions into ``WorkflowOutcome``
values at its boundary; only ``ConfigurationError`` is expected to escape, and
only at startup.
"""

from typing import Final, Iterable, Tuple

__all__: Final = [
    "WardenError",
    "ValidationError",
    "PasswordMismatchError",
    "UserNotFoundError",
    "AuthenticationError",
    "CredentialRejectedError",
    "TokenDecodeError",
    "SessionTokenError",
    "RepositoryError",
    "ConfigurationError",
    "EmailServiceError",
]


class WardenError(Exception):
    """Base exception class for all custom errors in the Warden application.

    Attributes:
        message (str): A human-readable error message.
        code (str): A unique, machine-readable error code.
        errors (tuple[str, ...]): Ordered sub-errors, empty unless the failure
            enumerates several causes.
    """

    message: str
    code: str = "generic_error"

    def __init__(
        self,
        message: str,
        code: str = "generic_error",
        errors: Iterable[str] = (),
    ):
        self.message = message
        self.code = code
        self.errors: Tuple[str, ...] = tuple(errors)
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Validation errors (rejected before the repository is touched)
# ---------------------------------------------------------------------------


class ValidationError(WardenError):
    """Raised for malformed input that never reaches the repository."""

    def __init__(self, message: str, code: str = "validation_error", errors: Iterable[str] = ()):
        super().__init__(message, code, errors)


class PasswordMismatchError(ValidationError):
    """Raised when a password and its confirmation differ."""

    def __init__(self, message: str, code: str = "password_mismatch"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Lookup errors
# ---------------------------------------------------------------------------


class UserNotFoundError(WardenError):
    """Raised when no user record matches the given email or id."""

    def __init__(self, message: str = "User not found", code: str = "user_not_found"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Auth-related errors
# ---------------------------------------------------------------------------


class AuthenticationError(WardenError):
    """Raised for general authentication failures.

    Maps to a ``401 Unauthorized`` when it reaches the API layer.
    """

    def __init__(self, message: str, code: str = "authentication_error", errors: Iterable[str] = ()):
        super().__init__(message, code, errors)


class CredentialRejectedError(AuthenticationError):
    """Raised when a password or one-time token is rejected."""

    def __init__(self, message: str, code: str = "credential_rejected", errors: Iterable[str] = ()):
        super().__init__(message, code, errors)


class TokenDecodeError(CredentialRejectedError):
    """Raised when a transport-encoded one-time token cannot be decoded.

    From the caller's perspective this is indistinguishable from a rejected
    token.
    """

    def __init__(self, message: str = "Invalid token.", code: str = "invalid_token"):
        super().__init__(message, code)


class SessionTokenError(AuthenticationError):
    """Raised when a bearer session token fails verification."""

    def __init__(self, message: str = "Invalid session token", code: str = "invalid_session_token"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Collaborator errors
# ---------------------------------------------------------------------------


class RepositoryError(WardenError):
    """Raised when the credential repository reports one or more failures.

    The repository's errors are kept in the order it reported them.
    """

    def __init__(self, message: str, errors: Iterable[str] = (), code: str = "repository_error"):
        super().__init__(message, code, errors)


class EmailServiceError(WardenError):
    """Raised when the email notifier fails to deliver a message."""

    def __init__(self, message: str, code: str = "email_service_error"):
        super().__init__(message, code)


class ConfigurationError(WardenError):
    """Raised when required configuration is absent or malformed.

    This is startup-fatal and never converted into a per-request outcome.
    """

    def __init__(self, message: str, code: str = "configuration_error"):
        super().__init__(message, code)
