"""Domain Value Objects for the account domain.

Value objects are immutable objects that describe domain concepts by their attributes
rather than their identity.
"""

from .account_requests import LoginRequest, RegistrationRequest, ResetPasswordRequest
from .one_time_token import RepositoryResult, TokenPurpose
from .session_token import (
    SESSION_TOKEN_LIFETIME,
    SessionClaims,
    SessionToken,
    SigningConfig,
    TokenId,
)
from .workflow_outcome import WorkflowOutcome

__all__ = [
    "LoginRequest",
    "RegistrationRequest",
    "ResetPasswordRequest",
    "RepositoryResult",
    "TokenPurpose",
    "SESSION_TOKEN_LIFETIME",
    "SessionClaims",
    "SessionToken",
    "SigningConfig",
    "TokenId",
    "WorkflowOutcome",
]
