from __future__ import annotations

"""/auth/resetpassword route module."""

from fastapi import APIRouter

from src.adapters.api.v1.auth.schemas import ResetPasswordRequest, WorkflowOutcomeResponse
from src.adapters.api.v1.auth.utils import outcome_response
from src.infrastructure.dependency_injection.auth_dependencies import IdentityWorkflow

router = APIRouter()


@router.post(
    "",
    response_model=WorkflowOutcomeResponse,
    responses={400: {"model": WorkflowOutcomeResponse}},
    summary="Reset password with a reset token",
    description=(
        "Consumes the password reset token from the emailed link and sets "
        "``newPassword``, which must equal ``confirmPassword``."
    ),
)
async def reset_password(payload: ResetPasswordRequest, workflow: IdentityWorkflow):
    outcome = await workflow.reset_password(payload.to_domain())
    return outcome_response(outcome)
