from __future__ import annotations

"""FastAPI dependency providers for bearer-authenticated endpoints."""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.exceptions import SessionTokenError
from src.domain.value_objects.session_token import SessionClaims
from src.infrastructure.dependency_injection.auth_dependencies import SessionIssuer

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_identity(
    issuer: SessionIssuer,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> SessionClaims:
    """Return the claims of the bearer session token.

    Raises:
        SessionTokenError: If the header is missing or the token is rejected.
    """
    if credentials is None or not credentials.credentials:
        raise SessionTokenError("Missing bearer token", code="missing_token")
    return issuer.verify(credentials.credentials)


CurrentIdentity = Annotated[SessionClaims, Depends(get_current_identity)]
