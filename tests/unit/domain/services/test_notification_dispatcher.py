"""Tests for NotificationDispatcher."""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest
from structlog.testing import capture_logs

from src.core.exceptions import ConfigurationError, EmailServiceError
from src.domain.interfaces.notifications import INotifier
from src.domain.services.auth.notification_dispatcher import NotificationDispatcher


class TestNotificationDispatcher:
    @pytest.fixture
    def notifier(self):
        notifier = Mock(spec=INotifier)
        notifier.send_email = AsyncMock()
        return notifier

    @pytest.mark.asyncio
    async def test_await_mode_delivers_inline(self, notifier):
        dispatcher = NotificationDispatcher(notifier)

        await dispatcher.dispatch("bob@example.com", "Hello", "<p>hi</p>")

        notifier.send_email.assert_awaited_once_with("bob@example.com", "Hello", "<p>hi</p>")
        assert dispatcher.pending_count == 0

    @pytest.mark.asyncio
    async def test_await_mode_logs_and_swallows_delivery_failure(self, notifier):
        notifier.send_email.side_effect = EmailServiceError("SMTP down")
        dispatcher = NotificationDispatcher(notifier, mode="await")

        with capture_logs() as logs:
            await dispatcher.dispatch("bob@example.com", "Hello", "<p>hi</p>")

        notifier.send_email.assert_awaited_once()
        failures = [e for e in logs if e["event"] == "Notification delivery failed"]
        assert len(failures) == 1
        assert failures[0]["log_level"] == "error"
        assert failures[0]["error"] == "SMTP down"
        assert failures[0]["dispatch_mode"] == "await"
        assert "bob@example.com" not in str(failures[0])

    @pytest.mark.asyncio
    async def test_await_mode_logs_unexpected_notifier_error(self, notifier):
        notifier.send_email.side_effect = ConnectionResetError("peer reset")
        dispatcher = NotificationDispatcher(notifier, mode="await")

        with capture_logs() as logs:
            await dispatcher.dispatch("bob@example.com", "Hello", "<p>hi</p>")

        crashes = [e for e in logs if e["event"] == "Notification delivery crashed"]
        assert len(crashes) == 1
        assert crashes[0]["log_level"] == "error"
        assert crashes[0]["error_type"] == "ConnectionResetError"
        assert crashes[0]["exc_info"] is True

    @pytest.mark.asyncio
    async def test_background_mode_schedules_and_drains(self, notifier):
        # Arrange
        release = asyncio.Event()

        async def slow_send(*args):
            await release.wait()

        notifier.send_email.side_effect = slow_send
        dispatcher = NotificationDispatcher(notifier, mode="background")

        # Act
        await dispatcher.dispatch("bob@example.com", "Hello", "<p>hi</p>")

        # Assert
        assert dispatcher.pending_count == 1
        release.set()
        await dispatcher.drain()
        assert dispatcher.pending_count == 0
        notifier.send_email.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_background_failure_is_logged(self, notifier):
        notifier.send_email.side_effect = EmailServiceError("SMTP down")
        dispatcher = NotificationDispatcher(notifier, mode="background")

        with capture_logs() as logs:
            await dispatcher.dispatch("bob@example.com", "Hello", "<p>hi</p>")
            await dispatcher.drain()

        assert dispatcher.pending_count == 0
        failures = [e for e in logs if e["event"] == "Notification delivery failed"]
        assert len(failures) == 1
        assert failures[0]["log_level"] == "error"
        assert failures[0]["dispatch_mode"] == "background"

    @pytest.mark.asyncio
    async def test_background_crash_after_completion_is_logged(self, notifier):
        # Arrange
        notifier.send_email.side_effect = RuntimeError("smtp lib bug")
        dispatcher = NotificationDispatcher(notifier, mode="background")

        # Act
        with capture_logs() as logs:
            await dispatcher.dispatch("bob@example.com", "Hello", "<p>hi</p>")
            for _ in range(5):
                await asyncio.sleep(0)
            assert dispatcher.pending_count == 0
            await dispatcher.drain()

        # Assert
        crashes = [e for e in logs if e["event"] == "Notification delivery crashed"]
        assert len(crashes) == 1
        assert crashes[0]["log_level"] == "error"
        assert crashes[0]["error"] == "smtp lib bug"
        assert crashes[0]["dispatch_mode"] == "background"

    @pytest.mark.asyncio
    async def test_drain_without_pending_work_returns(self, notifier):
        await NotificationDispatcher(notifier, mode="background").drain()

    def test_unknown_mode_is_a_configuration_error(self, notifier):
        with pytest.raises(ConfigurationError):
            NotificationDispatcher(notifier, mode="fire-and-forget")
