"""Request value objects consumed by the identity workflow."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RegistrationRequest:
    email: str
    password: str = field(repr=False)
    confirm_password: str = field(repr=False)

    @property
    def passwords_match(self) -> bool:
        return self.password == self.confirm_password


@dataclass(frozen=True)
class LoginRequest:
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class ResetPasswordRequest:
    """Completes a password reset.

    Attributes:
        email: Account email the reset link was sent to.
        token: Transport-encoded one-time token taken from the reset link.
        new_password: Replacement password.
        confirm_password: Must equal ``new_password``.
    """

    email: str
    token: str = field(repr=False)
    new_password: str = field(repr=False)
    confirm_password: str = field(repr=False)

    @property
    def passwords_match(self) -> bool:
        return self.new_password == self.confirm_password
