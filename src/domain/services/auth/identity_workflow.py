"""Identity Workflow Domain Service.

Orchestrates the account lifecycle on top of the credential repository:

    Unregistered --register--> PendingEmailConfirmation --confirm_email--> Active

Password reset (``forgot_password`` then ``reset_password``) is an orthogonal
sub-flow available from either registered state. The state is never stored by
this service; it is derived from the repository's ``email_confirmed`` flag.

Each operation raises domain exceptions internally and converts them into a
``WorkflowOutcome`` before returning, so no per-request failure escapes.

Known behaviours kept on purpose:
- ``login`` distinguishes "no such email" from "wrong password", while
  ``forgot_password`` only says "no user associated with email".
- ``login`` does not require a confirmed email.
"""

from typing import Optional
from urllib.parse import quote

import structlog

from src.core.exceptions import (
    CredentialRejectedError,
    PasswordMismatchError,
    RepositoryError,
    TokenDecodeError,
    UserNotFoundError,
    WardenError,
)
from src.domain.entities.user import UserRecord
from src.domain.interfaces.repositories import ICredentialRepository
from src.domain.interfaces.services import (
    IIdentityWorkflowService,
    INotificationDispatcher,
    ISessionTokenIssuer,
)
from src.domain.services.auth.token_codec import OneTimeTokenCodec
from src.domain.value_objects.account_requests import (
    LoginRequest,
    RegistrationRequest,
    ResetPasswordRequest,
)
from src.domain.value_objects.one_time_token import TokenPurpose
from src.domain.value_objects.session_token import SessionClaims
from src.domain.value_objects.workflow_outcome import WorkflowOutcome
from src.utils.security import mask_email

logger = structlog.get_logger(__name__)

# Registration
CONFIRM_PASSWORD_MISMATCH = "Confirm password does not match"
USER_NOT_CREATED = "User did not create"
USER_CREATED = "User created successfully!"
CONFIRM_EMAIL_SUBJECT = "Confirm Your Email"

# Login
NO_USER_WITH_EMAIL = "there is no user with that Email Address"
INVALID_PASSWORD = "Invalid Password"

# Email confirmation
USER_NOT_FOUND = "User not found"
EMAIL_CONFIRMED = "Email confirmed successfully"
EMAIL_NOT_CONFIRMED = "Email did not confirmed"

# Password reset
NO_USER_ASSOCIATED = "No user associated with email"
RESET_URL_SENT = "Reset password URL has been sent to the email successfully!"
RESET_PASSWORD_SUBJECT = "Reset Password"
NEW_PASSWORD_MISMATCH = "Password does not match its confirmation"
PASSWORD_RESET = "Password has been reset successfully"
PASSWORD_NOT_RESET = "Something went wrong"


class IdentityWorkflowService(IIdentityWorkflowService):
    """Domain service for the account lifecycle.

    The service is stateless; every durable change is made by the credential
    repository. Collaborators are passed in explicitly.

    Responsibilities:
    - Register users and send the email-confirmation link
    - Verify credentials and issue session tokens
    - Consume email-confirmation tokens
    - Send password-reset links and consume password-reset tokens
    """

    def __init__(
        self,
        credential_repository: ICredentialRepository,
        notification_dispatcher: INotificationDispatcher,
        session_token_issuer: ISessionTokenIssuer,
        base_url: str,
        app_name: str = "Warden",
        token_codec: Optional[OneTimeTokenCodec] = None,
    ):
        """Initialize the workflow with its collaborators.

        Args:
            credential_repository: Store for users, passwords and one-time tokens
            notification_dispatcher: Delivers confirmation and reset emails
            session_token_issuer: Mints session tokens on login
            base_url: Prefix of the confirmation and reset links
            app_name: Name shown in the confirmation email
            token_codec: Transport codec for one-time tokens
        """
        self._repository = credential_repository
        self._dispatcher = notification_dispatcher
        self._issuer = session_token_issuer
        self._base_url = base_url.rstrip("/")
        self._app_name = app_name
        self._codec = token_codec or OneTimeTokenCodec()

    async def register(self, request: RegistrationRequest) -> WorkflowOutcome:
        """Create an account pending email confirmation.

        Mismatching passwords are rejected before the repository is called.
        The confirmation email is dispatched after the user is created; a
        delivery failure does not undo the registration.
        """
        request_logger = logger.bind(operation="register", email=mask_email(request.email))
        user = UserRecord(email=request.email, username=request.email)

        try:
            if not request.passwords_match:
                raise PasswordMismatchError(CONFIRM_PASSWORD_MISMATCH)

            result = await self._repository.create(user, request.password)
            if not result.succeeded:
                raise RepositoryError(USER_NOT_CREATED, result.errors)
        except WardenError as e:
            request_logger.warning(
                "Registration rejected",
                error_code=e.code,
                errors=list(e.errors),
            )
            return WorkflowOutcome.from_error(e)

        token = await self._repository.generate_token(user, TokenPurpose.EMAIL_CONFIRMATION)
        url = self.build_confirmation_url(user.id, self._codec.encode_text(token))
        await self._dispatcher.dispatch(
            user.email,
            CONFIRM_EMAIL_SUBJECT,
            f"<h1>Welcome to {self._app_name}</h1>"
            f"<p>please confirm your email by <a href='{url}'>Clicking here</a></p>",
        )

        request_logger.info("User registered", user_id=user.id)
        return WorkflowOutcome.succeeded(USER_CREATED)

    async def login(self, request: LoginRequest) -> WorkflowOutcome:
        """Verify credentials and issue a 30-day session token.

        On success the outcome's ``message`` is the token and ``expiry`` its
        expiration time.
        """
        request_logger = logger.bind(operation="login", email=mask_email(request.email))

        try:
            user = await self._repository.get_by_email(request.email)
            if user is None:
                raise UserNotFoundError(NO_USER_WITH_EMAIL)

            if not await self._repository.check_password(user, request.password):
                raise CredentialRejectedError(INVALID_PASSWORD, code="invalid_password")
        except WardenError as e:
            request_logger.warning("Login rejected", error_code=e.code)
            return WorkflowOutcome.from_error(e)

        session = self._issuer.issue(
            SessionClaims(email=request.email, subject_id=str(user.id))
        )
        request_logger.info(
            "User logged in",
            user_id=user.id,
            email_confirmed=user.email_confirmed,
            expires_at=session.expires_at.isoformat(),
        )
        return WorkflowOutcome.succeeded(session.token, expiry=session.expires_at)

    async def confirm_email(self, user_id: str, token: str) -> WorkflowOutcome:
        """Consume an email-confirmation token for the given user."""
        request_logger = logger.bind(operation="confirm_email", user_id=user_id)

        try:
            user = await self._repository.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(USER_NOT_FOUND)

            raw_token = self._decode_token(token, EMAIL_NOT_CONFIRMED)
            result = await self._repository.confirm_email(user, raw_token)
            if not result.succeeded:
                raise CredentialRejectedError(EMAIL_NOT_CONFIRMED, errors=result.errors)
        except WardenError as e:
            request_logger.warning(
                "Email confirmation rejected",
                error_code=e.code,
                errors=list(e.errors),
            )
            return WorkflowOutcome.from_error(e)

        request_logger.info("Email confirmed")
        return WorkflowOutcome.succeeded(EMAIL_CONFIRMED)

    async def forgot_password(self, email: str) -> WorkflowOutcome:
        """Send a password-reset link to a registered email."""
        request_logger = logger.bind(operation="forgot_password", email=mask_email(email))

        user = await self._repository.get_by_email(email)
        if user is None:
            request_logger.warning("Password reset requested for unknown email")
            return WorkflowOutcome.from_error(UserNotFoundError(NO_USER_ASSOCIATED))

        token = await self._repository.generate_token(user, TokenPurpose.PASSWORD_RESET)
        url = self.build_reset_url(email, self._codec.encode_text(token))
        await self._dispatcher.dispatch(
            email,
            RESET_PASSWORD_SUBJECT,
            "<h1>follow the instructions to reset your password</h1>"
            f"<p>To reset password <a href='{url}'>Click here</a></p>",
        )

        request_logger.info("Password reset link dispatched", user_id=user.id)
        return WorkflowOutcome.succeeded(RESET_URL_SENT)

    async def reset_password(self, request: ResetPasswordRequest) -> WorkflowOutcome:
        """Consume a password-reset token and set the new password.

        Mismatching passwords are rejected before the repository's reset
        primitive is called.
        """
        request_logger = logger.bind(operation="reset_password", email=mask_email(request.email))

        try:
            user = await self._repository.get_by_email(request.email)
            if user is None:
                raise UserNotFoundError(NO_USER_ASSOCIATED)

            if not request.passwords_match:
                raise PasswordMismatchError(NEW_PASSWORD_MISMATCH)

            raw_token = self._decode_token(request.token, PASSWORD_NOT_RESET)
            result = await self._repository.reset_password(user, raw_token, request.new_password)
            if not result.succeeded:
                raise RepositoryError(PASSWORD_NOT_RESET, result.errors)
        except WardenError as e:
            request_logger.warning(
                "Password reset rejected",
                error_code=e.code,
                errors=list(e.errors),
            )
            return WorkflowOutcome.from_error(e)

        request_logger.info("Password reset", user_id=user.id)
        return WorkflowOutcome.succeeded(PASSWORD_RESET)

    def build_confirmation_url(self, user_id: str, encoded_token: str) -> str:
        return (
            f"{self._base_url}/confirmemail"
            f"?userid={quote(str(user_id), safe='')}&token={encoded_token}"
        )

    def build_reset_url(self, email: str, encoded_token: str) -> str:
        return (
            f"{self._base_url}/resetpassword"
            f"?email={quote(email, safe='@')}&token={encoded_token}"
        )

    def _decode_token(self, token: str, failure_message: str) -> str:
        """Transport-decode a token, reporting a decode failure as a rejection."""
        try:
            return self._codec.decode_text(token)
        except TokenDecodeError as e:
            raise CredentialRejectedError(failure_message, code=e.code, errors=[e.message]) from e
