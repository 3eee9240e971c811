from __future__ import annotations

"""
Global exception handlers for the FastAPI application.

This module contains centralized handlers for custom application exceptions,
translating them into appropriate HTTP responses. Workflow failures are
normally returned as outcomes by the routes; these handlers cover errors that
escape a route (bearer verification, request validation, misconfiguration).
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from structlog import get_logger

from src.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    WardenError,
)

__all__ = [
    "INVALID_PROPERTIES",
    "request_validation_error_handler",
    "authentication_error_handler",
    "configuration_error_handler",
    "warden_error_handler",
    "unhandled_exception_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)

INVALID_PROPERTIES = "Some properties are not valid"


def _outcome_body(message: str, errors: list) -> dict:
    return {"success": False, "message": message, "errors": errors, "expiry": None}


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handles malformed request payloads, returning a `400 Bad Request`.

    The body has the same shape as a failed workflow outcome, with one entry
    per invalid field, e.g. ``"body.email: value is not a valid email address"``.
    """
    errors = [
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
        for error in exc.errors()
    ]
    logger.info(
        "Request validation failed",
        path=request.url.path,
        error_count=len(errors),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_outcome_body(INVALID_PROPERTIES, errors),
    )


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    """Handles `AuthenticationError`, returning a `401 Unauthorized`.

    Raised when a bearer session token is missing, malformed, expired or
    signed for another issuer or audience.

    Args:
        request: The incoming `Request` object.
        exc: The `AuthenticationError` instance.

    Returns:
        A `JSONResponse` with a 401 status code and error detail.
    """
    logger.warning(
        "Authentication failure",
        error=exc.code,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Handles `ConfigurationError`, returning a `500 Internal Server Error`.

    The message is logged but not returned; it can name settings.
    """
    logger.error(
        "Service is misconfigured",
        error_code=exc.code,
        error_message=exc.message,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "The service is not configured correctly."},
    )


async def warden_error_handler(request: Request, exc: WardenError) -> JSONResponse:
    """Handles any other `WardenError` as a failed outcome with `400`."""
    logger.warning(
        "Application error reached the API boundary",
        error_code=exc.code,
        error_message=exc.message,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_outcome_body(exc.message, list(exc.errors)),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled exception",
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registers all custom exception handlers with the FastAPI application.

    Starlette resolves handlers by walking the exception's MRO, so the
    ``WardenError`` fallback does not shadow the more specific handlers.

    Args:
        app: The `FastAPI` application instance.
    """
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
    app.add_exception_handler(WardenError, warden_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
