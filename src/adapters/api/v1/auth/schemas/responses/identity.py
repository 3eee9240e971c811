from __future__ import annotations

"""Response model for the identity carried by a session token."""

from pydantic import BaseModel

from src.domain.value_objects.session_token import SessionClaims


class IdentityOut(BaseModel):
    email: str
    subject_id: str

    @classmethod
    def from_claims(cls, claims: SessionClaims) -> "IdentityOut":
        return cls(email=claims.email, subject_id=claims.subject_id)
