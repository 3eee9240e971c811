"""Service interfaces for the account bounded context."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.domain.value_objects.account_requests import (
    LoginRequest,
    RegistrationRequest,
    ResetPasswordRequest,
)
from src.domain.value_objects.session_token import SessionClaims, SessionToken
from src.domain.value_objects.workflow_outcome import WorkflowOutcome


class ISessionTokenIssuer(ABC):
    """Mints and verifies stateless bearer session tokens."""

    @abstractmethod
    def issue(self, claims: SessionClaims, now: Optional[datetime] = None) -> SessionToken:
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str) -> SessionClaims:
        """Verify a token and return its claims.

        Raises:
            SessionTokenError: If the signature, issuer, audience or expiry is invalid.
        """
        raise NotImplementedError


class INotificationDispatcher(ABC):
    """Hands messages to the notifier and makes delivery failures observable."""

    @abstractmethod
    async def dispatch(self, to_email: str, subject: str, html_content: str) -> None:
        raise NotImplementedError


class IIdentityWorkflowService(ABC):
    """Account lifecycle: registration, login, email confirmation, password reset.

    Every operation returns a ``WorkflowOutcome``; per-request failures are
    never raised past this boundary.
    """

    @abstractmethod
    async def register(self, request: RegistrationRequest) -> WorkflowOutcome:
        raise NotImplementedError

    @abstractmethod
    async def login(self, request: LoginRequest) -> WorkflowOutcome:
        raise NotImplementedError

    @abstractmethod
    async def confirm_email(self, user_id: str, token: str) -> WorkflowOutcome:
        raise NotImplementedError

    @abstractmethod
    async def forgot_password(self, email: str) -> WorkflowOutcome:
        raise NotImplementedError

    @abstractmethod
    async def reset_password(self, request: ResetPasswordRequest) -> WorkflowOutcome:
        raise NotImplementedError
