from __future__ import annotations

"""/auth/login route module."""

from fastapi import APIRouter

from src.adapters.api.v1.auth.schemas import LoginRequest, WorkflowOutcomeResponse
from src.adapters.api.v1.auth.utils import outcome_response
from src.infrastructure.dependency_injection.auth_dependencies import IdentityWorkflow

router = APIRouter()


@router.post(
    "",
    response_model=WorkflowOutcomeResponse,
    responses={400: {"model": WorkflowOutcomeResponse}},
    summary="Authenticate with email and password",
    description=(
        "Verifies the credentials and returns a 30-day session token in "
        "``message`` with its expiration time in ``expiry``."
    ),
)
async def login_user(payload: LoginRequest, workflow: IdentityWorkflow):
    outcome = await workflow.login(payload.to_domain())
    return outcome_response(outcome)
