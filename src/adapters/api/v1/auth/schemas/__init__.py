from __future__ import annotations

"""Authentication API schemas package.

Request models live in ``requests``; response models are grouped under
``responses``. Everything is re-exported so routes and tests can keep importing
from ``src.adapters.api.v1.auth.schemas``.
"""

# flake8: noqa: F401 re-export

from .requests import (
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
)
from .responses.identity import IdentityOut
from .responses.outcome import WorkflowOutcomeResponse

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "IdentityOut",
    "WorkflowOutcomeResponse",
]
