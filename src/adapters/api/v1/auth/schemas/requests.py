from __future__ import annotations

"""Request-payload Pydantic models for authentication endpoints.

Field names on the wire are camelCase (``confirmPassword``, ``newPassword``);
the snake_case attribute names are accepted as well.

Email fields are checked for format but passed on exactly as sent, so the
``Email`` claim of a session token matches the address used to log in.
"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.networks import validate_email

from src.domain.value_objects.account_requests import (
    LoginRequest as LoginCommand,
    RegistrationRequest,
    ResetPasswordRequest as ResetPasswordCommand,
)

# ---------------------------------------------------------------------------
# Shared field types ---------------------------------------------------------
# ---------------------------------------------------------------------------


def _check_email_format(value: str) -> str:
    validate_email(value)
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email_format)]


# ---------------------------------------------------------------------------
# Concrete request models ----------------------------------------------------
# ---------------------------------------------------------------------------


class RegisterRequest(BaseModel):
    """Payload expected by ``POST /auth/register``."""

    model_config = ConfigDict(populate_by_name=True)

    email: EmailAddress = Field(..., examples=["john@example.com"])
    password: str = Field(..., examples=["Str0ngP@ssw0rd"])
    confirm_password: str = Field(..., alias="confirmPassword", examples=["Str0ngP@ssw0rd"])

    def to_domain(self) -> RegistrationRequest:
        return RegistrationRequest(
            email=self.email,
            password=self.password,
            confirm_password=self.confirm_password,
        )


class LoginRequest(BaseModel):
    """Payload expected by ``POST /auth/login``."""

    email: EmailAddress = Field(..., examples=["john@example.com"])
    password: str = Field(..., examples=["Str0ngP@ssw0rd"])

    def to_domain(self) -> LoginCommand:
        return LoginCommand(email=self.email, password=self.password)


class ForgotPasswordRequest(BaseModel):
    """Payload expected by ``POST /auth/forgotpassword``."""

    email: EmailAddress = Field(
        ...,
        examples=["john@example.com"],
        description="Email address to send password reset instructions to",
    )


class ResetPasswordRequest(BaseModel):
    """Payload expected by ``POST /auth/resetpassword``."""

    model_config = ConfigDict(populate_by_name=True)

    email: EmailAddress = Field(..., examples=["john@example.com"])
    token: str = Field(
        ...,
        min_length=1,
        description="Password reset token taken from the emailed link",
    )
    new_password: str = Field(..., alias="newPassword", examples=["NewPass456!"])
    confirm_password: str = Field(..., alias="confirmPassword", examples=["NewPass456!"])

    def to_domain(self) -> ResetPasswordCommand:
        return ResetPasswordCommand(
            email=self.email,
            token=self.token,
            new_password=self.new_password,
            confirm_password=self.confirm_password,
        )
