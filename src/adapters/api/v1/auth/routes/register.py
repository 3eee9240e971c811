from __future__ import annotations

"""/auth/register route module.

Creates an account pending email confirmation. The confirmation link is
emailed by the workflow; this module only translates HTTP to the domain
request and the outcome back to HTTP.
"""

from fastapi import APIRouter

from src.adapters.api.v1.auth.schemas import RegisterRequest, WorkflowOutcomeResponse
from src.adapters.api.v1.auth.utils import outcome_response
from src.infrastructure.dependency_injection.auth_dependencies import IdentityWorkflow

router = APIRouter()


@router.post(
    "",
    response_model=WorkflowOutcomeResponse,
    responses={400: {"model": WorkflowOutcomeResponse}},
    summary="Register a new user",
    description="Creates a user account and sends an email-confirmation link.",
)
async def register_user(payload: RegisterRequest, workflow: IdentityWorkflow):
    """Register a new user.

    Returns:
        200 with a success outcome, or 400 with the repository's errors
        (duplicate email, password policy violations) or a password
        confirmation mismatch.
    """
    outcome = await workflow.register(payload.to_domain())
    return outcome_response(outcome)
