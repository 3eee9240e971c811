"""Domain Services for the Account Bounded Context.

- Identity Workflow: registration, login, email confirmation, password reset
- Session Tokens: stateless bearer token issuance and verification
- One-Time Token Codec: URL-safe transport of repository tokens
- Notification Dispatch: observable delivery of workflow emails
"""

from .auth import (
    IdentityWorkflowService,
    NotificationDispatcher,
    OneTimeTokenCodec,
    SessionTokenIssuer,
)

__all__ = [
    "IdentityWorkflowService",
    "NotificationDispatcher",
    "OneTimeTokenCodec",
    "SessionTokenIssuer",
]
