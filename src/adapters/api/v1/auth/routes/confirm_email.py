from __future__ import annotations

"""/auth/confirmemail route module.

This is the target of the link embedded in the confirmation email, so it
answers GET as well as POST. Both take ``userid`` and ``token`` from the query
string.
"""

from fastapi import APIRouter, Query

from src.adapters.api.v1.auth.schemas import WorkflowOutcomeResponse
from src.adapters.api.v1.auth.utils import outcome_response
from src.infrastructure.dependency_injection.auth_dependencies import IdentityWorkflow

router = APIRouter()


@router.api_route(
    "",
    methods=["GET", "POST"],
    response_model=WorkflowOutcomeResponse,
    responses={400: {"model": WorkflowOutcomeResponse}},
    summary="Confirm user email address",
    description="Consumes the email-confirmation token sent at registration.",
)
async def confirm_email(
    workflow: IdentityWorkflow,
    userid: str = Query(..., min_length=1, description="Identifier of the account"),
    token: str = Query(..., min_length=1, description="Transport-encoded confirmation token"),
):
    outcome = await workflow.confirm_email(userid, token)
    return outcome_response(outcome)
