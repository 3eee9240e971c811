"""Middleware configuration for the FastAPI application.

This module handles the configuration and registration of all middleware
components: CORS and per-request correlation ids.
"""

import uuid

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.core.config.settings import settings

REQUEST_ID_HEADER = "X-Request-ID"


def configure_middleware(app: FastAPI) -> None:
    """Configure all middleware for the FastAPI application.

    Args:
        app (FastAPI): The FastAPI application instance
    """
    # CORS middleware configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    # Correlation id middleware
    app.middleware("http")(correlation_id_middleware)


async def correlation_id_middleware(request: Request, call_next):
    """Bind a correlation id to every log line emitted while serving a request.

    The id is taken from the ``X-Request-ID`` header when the caller sends one
    and generated otherwise; it is echoed back on the response.

    Args:
        request (Request): The incoming request
        call_next: The next middleware or route handler

    Returns:
        Response: The response with the request id header
    """
    correlation_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        correlation_id=correlation_id,
        method=request.method,
        path=request.url.path,
    )
    try:
        response = await call_next(request)
    finally:
        structlog.contextvars.clear_contextvars()
    response.headers[REQUEST_ID_HEADER] = correlation_id
    return response
