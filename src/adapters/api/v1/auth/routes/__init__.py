from __future__ import annotations

"""Subpackage aggregating individual auth route modules."""

__all__ = [
    "register",
    "login",
    "confirm_email",
    "forgot_password",
    "reset_password",
    "me",
]
