from __future__ import annotations

"""/auth/forgotpassword route module."""

from fastapi import APIRouter

from src.adapters.api.v1.auth.schemas import ForgotPasswordRequest, WorkflowOutcomeResponse
from src.adapters.api.v1.auth.utils import outcome_response
from src.infrastructure.dependency_injection.auth_dependencies import IdentityWorkflow

router = APIRouter()


@router.post(
    "",
    response_model=WorkflowOutcomeResponse,
    responses={400: {"model": WorkflowOutcomeResponse}},
    summary="Request a password reset link",
    description="Emails a password reset link to a registered address.",
)
async def forgot_password(payload: ForgotPasswordRequest, workflow: IdentityWorkflow):
    outcome = await workflow.forgot_password(str(payload.email))
    return outcome_response(outcome)
