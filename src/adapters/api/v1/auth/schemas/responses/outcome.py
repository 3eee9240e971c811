from __future__ import annotations

"""Response model mirroring :class:`WorkflowOutcome`."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.value_objects.workflow_outcome import WorkflowOutcome


class WorkflowOutcomeResponse(BaseModel):
    """Serialised workflow outcome.

    For a successful login ``message`` holds the session token and ``expiry``
    its expiration time.
    """

    success: bool
    message: str
    errors: List[str] = Field(default_factory=list)
    expiry: Optional[datetime] = None

    @classmethod
    def from_outcome(cls, outcome: WorkflowOutcome) -> "WorkflowOutcomeResponse":
        return cls(
            success=outcome.success,
            message=outcome.message,
            errors=list(outcome.errors),
            expiry=outcome.expiry,
        )
