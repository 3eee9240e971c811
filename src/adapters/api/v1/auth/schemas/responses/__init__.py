from __future__ import annotations

"""Re-export response models for authentication endpoints."""

# flake8: noqa: F401 re-export

from .identity import IdentityOut
from .outcome import WorkflowOutcomeResponse

__all__ = [
    "IdentityOut",
    "WorkflowOutcomeResponse",
]
