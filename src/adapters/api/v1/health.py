"""Liveness endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from src.core.config.settings import settings
from src.core.logging import logger

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    env: str
    version: str
    timestamp: datetime


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Report that the service is up. The credential store is in-process, so
    there are no downstream dependencies to check.
    """
    logger.debug("health_check", env=settings.APP_ENV)
    return HealthResponse(
        status="ok",
        env=settings.APP_ENV,
        version=settings.VERSION,
        timestamp=datetime.now(timezone.utc),
    )
