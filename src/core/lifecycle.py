"""Application lifecycle management.

This module handles application startup and shutdown events. Startup builds
the process-wide collaborators so that a bad signing key fails the boot
instead of the first login; shutdown waits for notifications still being
delivered in the background.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config.settings import settings
from src.core.logging import logger
from src.infrastructure.dependency_injection.auth_dependencies import (
    get_notification_dispatcher,
    get_session_token_issuer,
)


def create_lifespan_manager():
    """Create the application lifespan manager.

    Returns:
        AsyncContextManager: The lifespan manager for the FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager that handles startup and shutdown events.

        Args:
            app (FastAPI): The FastAPI application instance

        Raises:
            ConfigurationError: If the session token signing configuration is invalid
        """
        # Startup
        get_session_token_issuer()
        dispatcher = get_notification_dispatcher()
        logger.info(
            "application_startup",
            env=settings.APP_ENV,
            version=settings.VERSION,
            dispatch_mode=dispatcher.mode,
        )

        yield

        # Shutdown
        if dispatcher.pending_count:
            logger.info("draining_notifications", pending=dispatcher.pending_count)
        await dispatcher.drain()
        logger.info("application_shutdown", env=settings.APP_ENV)

    return lifespan
