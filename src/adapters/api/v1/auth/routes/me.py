from __future__ import annotations

"""/auth/me route module.

Returns the identity carried by a bearer session token. Verification is
purely cryptographic; no account lookup is made.
"""

from fastapi import APIRouter

from src.adapters.api.v1.auth.dependencies import CurrentIdentity
from src.adapters.api.v1.auth.schemas import IdentityOut

router = APIRouter()


@router.get(
    "",
    response_model=IdentityOut,
    summary="Describe the authenticated identity",
)
async def read_current_identity(identity: CurrentIdentity) -> IdentityOut:
    return IdentityOut.from_claims(identity)
