from __future__ import annotations

"""Utility functions for authentication API routes."""

from fastapi import status
from fastapi.responses import JSONResponse

from src.adapters.api.v1.auth.schemas import WorkflowOutcomeResponse
from src.domain.value_objects.workflow_outcome import WorkflowOutcome


def outcome_response(outcome: WorkflowOutcome) -> JSONResponse:
    """Render a workflow outcome as JSON.

    Successful outcomes are sent with ``200 OK``, failed ones with
    ``400 Bad Request``; the body is the same envelope in both cases.
    """
    status_code = status.HTTP_200_OK if outcome.success else status.HTTP_400_BAD_REQUEST
    body = WorkflowOutcomeResponse.from_outcome(outcome)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))
