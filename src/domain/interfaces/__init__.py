"""Domain Interfaces for dependency inversion.

These interfaces define contracts that infrastructure and application
layers must implement:

- Repositories: the external credential store
- Notifications: outbound email delivery
- Services: session tokens, notification dispatch and the identity workflow
"""

from .notifications import INotifier
from .repositories import ICredentialRepository
from .services import (
    IIdentityWorkflowService,
    INotificationDispatcher,
    ISessionTokenIssuer,
)

__all__ = [
    "ICredentialRepository",
    "INotifier",
    "INotificationDispatcher",
    "IIdentityWorkflowService",
    "ISessionTokenIssuer",
]
