from .identity_workflow import IdentityWorkflowService
from .notification_dispatcher import NotificationDispatcher
from .password_policy import PasswordPolicyValidator
from .session_token import SessionTokenIssuer
from .token_codec import OneTimeTokenCodec

__all__ = [
    "IdentityWorkflowService",
    "NotificationDispatcher",
    "PasswordPolicyValidator",
    "SessionTokenIssuer",
    "OneTimeTokenCodec",
]
