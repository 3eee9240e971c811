"""Notification dispatch with observable delivery failures.

Workflow operations report success once delivery has been attempted. Whether
"attempted" means "awaited" or "scheduled" is decided by the dispatch mode:

- ``await``: the notifier is awaited inline; a failure is logged and the
  workflow carries on.
- ``background``: delivery runs in a detached task; the task logs its own
  failure. ``drain()`` waits for outstanding deliveries (used on shutdown).

In both modes an ``EmailServiceError`` is logged at error level with the masked
recipient and subject. Any other exception raised by the notifier is logged
with its traceback. Neither is returned to the caller.
"""

import asyncio
from typing import Set

import structlog

from src.core.exceptions import ConfigurationError, EmailServiceError
from src.domain.interfaces.notifications import INotifier
from src.domain.interfaces.services import INotificationDispatcher
from src.utils.security import mask_email

logger = structlog.get_logger(__name__)

DISPATCH_MODES = ("await", "background")


class NotificationDispatcher(INotificationDispatcher):
    def __init__(self, notifier: INotifier, mode: str = "await"):
        if mode not in DISPATCH_MODES:
            raise ConfigurationError(f"Unknown notification dispatch mode: {mode!r}")
        self._notifier = notifier
        self._mode = mode
        self._pending: Set[asyncio.Task] = set()

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def dispatch(self, to_email: str, subject: str, html_content: str) -> None:
        if self._mode == "background":
            task = asyncio.create_task(self._deliver(to_email, subject, html_content))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)
            logger.debug(
                "Notification scheduled",
                to_email=mask_email(to_email),
                subject=subject,
            )
            return

        await self._deliver(to_email, subject, html_content)

    async def drain(self) -> None:
        """Wait for every background delivery that is still running."""
        if not self._pending:
            return
        results = await asyncio.gather(*list(self._pending), return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException):
                logger.error(
                    "Background notification crashed",
                    error=str(result),
                    error_type=type(result).__name__,
                )

    async def _deliver(self, to_email: str, subject: str, html_content: str) -> None:
        try:
            await self._notifier.send_email(to_email, subject, html_content)
        except EmailServiceError as e:
            logger.error(
                "Notification delivery failed",
                to_email=mask_email(to_email),
                subject=subject,
                error=e.message,
                dispatch_mode=self._mode,
            )
            return
        except Exception as e:
            logger.exception(
                "Notification delivery crashed",
                to_email=mask_email(to_email),
                subject=subject,
                error=str(e),
                error_type=type(e).__name__,
                dispatch_mode=self._mode,
            )
            return

        logger.info(
            "Notification delivered",
            to_email=mask_email(to_email),
            subject=subject,
            dispatch_mode=self._mode,
        )
