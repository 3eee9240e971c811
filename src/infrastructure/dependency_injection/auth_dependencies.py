"""Dependencies for the identity workflow.

This module wires the domain services to their infrastructure implementations
for FastAPI's dependency injection. Stateful collaborators (the credential
repository, the notification dispatcher and the session token issuer) are
process-wide singletons; the workflow service itself is cheap and stateless,
so it is assembled per request from them.

Tests replace any of these factories through ``app.dependency_overrides``.
"""

from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from src.core.config.settings import settings
from src.domain.interfaces.notifications import INotifier
from src.domain.interfaces.repositories import ICredentialRepository
from src.domain.interfaces.services import (
    IIdentityWorkflowService,
    ISessionTokenIssuer,
)
from src.domain.services.auth.identity_workflow import IdentityWorkflowService
from src.domain.services.auth.notification_dispatcher import NotificationDispatcher
from src.domain.services.auth.password_policy import PasswordPolicyValidator
from src.domain.services.auth.session_token import SessionTokenIssuer
from src.domain.value_objects.session_token import SigningConfig
from src.infrastructure.repositories.in_memory_credential_repository import (
    InMemoryCredentialRepository,
)
from src.infrastructure.services.email_notifier import EmailNotifier
from src.utils.security import create_password_context


# ---------------------------------------------------------------------------
# Infrastructure Layer Dependencies
# ---------------------------------------------------------------------------


@lru_cache
def get_credential_repository() -> ICredentialRepository:
    """Factory that returns the credential repository.

    The repository owns the only durable state in the service, so a single
    instance is shared by every request.
    """
    policy = PasswordPolicyValidator(
        min_length=settings.PASSWORD_MIN_LENGTH,
        require_non_alphanumeric=settings.PASSWORD_REQUIRE_NON_ALPHANUMERIC,
        require_digit=settings.PASSWORD_REQUIRE_DIGIT,
        require_lowercase=settings.PASSWORD_REQUIRE_LOWERCASE,
        require_uppercase=settings.PASSWORD_REQUIRE_UPPERCASE,
    )
    return InMemoryCredentialRepository(
        password_policy=policy,
        password_context=create_password_context(settings.BCRYPT_WORK_FACTOR),
        token_lifetime=timedelta(hours=settings.ONE_TIME_TOKEN_EXPIRE_HOURS),
    )


@lru_cache
def get_notifier() -> INotifier:
    """Factory that returns the SMTP notifier (log-only in test mode)."""
    return EmailNotifier(settings)


@lru_cache
def get_notification_dispatcher() -> NotificationDispatcher:
    """Factory that returns the dispatcher.

    Shared so that background deliveries can be drained on shutdown.
    """
    return NotificationDispatcher(get_notifier(), mode=settings.NOTIFICATION_DISPATCH_MODE)


@lru_cache
def get_session_token_issuer() -> ISessionTokenIssuer:
    """Factory that returns the session token issuer.

    Raises:
        ConfigurationError: If the signing configuration is invalid.
    """
    return SessionTokenIssuer(
        SigningConfig(
            key=settings.JWT_SIGNING_KEY.get_secret_value(),
            issuer=settings.JWT_ISSUER,
            audience=settings.JWT_AUDIENCE,
        )
    )


# ---------------------------------------------------------------------------
# Domain Service Dependencies
# ---------------------------------------------------------------------------


def get_identity_workflow_service(
    credential_repository: ICredentialRepository = Depends(get_credential_repository),
    notification_dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    session_token_issuer: ISessionTokenIssuer = Depends(get_session_token_issuer),
) -> IIdentityWorkflowService:
    """Factory that returns the identity workflow service.

    Args:
        credential_repository: Store for users and one-time tokens
        notification_dispatcher: Delivers confirmation and reset emails
        session_token_issuer: Mints session tokens on login

    Returns:
        IIdentityWorkflowService: Workflow bound to the configured base URL
    """
    return IdentityWorkflowService(
        credential_repository=credential_repository,
        notification_dispatcher=notification_dispatcher,
        session_token_issuer=session_token_issuer,
        base_url=settings.APP_URL,
        app_name=settings.PROJECT_NAME,
    )


# ---------------------------------------------------------------------------
# Type aliases for route signatures
# ---------------------------------------------------------------------------

IdentityWorkflow = Annotated[IIdentityWorkflowService, Depends(get_identity_workflow_service)]
SessionIssuer = Annotated[ISessionTokenIssuer, Depends(get_session_token_issuer)]
