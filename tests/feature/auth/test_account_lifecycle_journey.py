"""End-to-end account lifecycle through the HTTP API.

These journeys run against the real workflow, the in-memory credential
repository and a notifier that records every email, so links are followed
exactly as a user would follow them from their inbox.
"""

from urllib.parse import urlsplit

import pytest
from fastapi import status
from httpx import AsyncClient
from structlog.testing import capture_logs

from src.domain.services.auth.notification_dispatcher import NotificationDispatcher
from src.infrastructure.dependency_injection.auth_dependencies import (
    get_notification_dispatcher,
)
from src.main import app
from tests.factories.user import fake_email, fake_strong_password
from tests.utils.notifier import RecordingNotifier


def _relative(link: str) -> str:
    parts = urlsplit(link)
    return f"{parts.path}?{parts.query}"


async def _register(client: AsyncClient, email: str, password: str):
    return await client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "confirmPassword": password},
    )


async def _login(client: AsyncClient, email: str, password: str):
    return await client.post("/api/auth/login", json={"email": email, "password": password})


class TestRegistrationAndConfirmation:
    @pytest.mark.asyncio
    async def test_register_confirm_and_login(
        self, async_client, credential_repository, recording_notifier
    ):
        email, password = fake_email(), fake_strong_password()

        # Register
        response = await _register(async_client, email, password)
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "User created successfully!"

        user = await credential_repository.get_by_email(email)
        assert user.email_confirmed is False
        assert len(recording_notifier.sent) == 1
        confirmation = recording_notifier.last
        assert confirmation.to_email == email
        assert confirmation.subject == "Confirm Your Email"
        assert f"userid={user.id}&token=" in confirmation.html_content

        # Follow the emailed link
        response = await async_client.get(_relative(confirmation.link))
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Email confirmed successfully"
        assert (await credential_repository.get_by_id(user.id)).email_confirmed is True

        # The link only works once
        response = await async_client.get(_relative(confirmation.link))
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Email did not confirmed"
        assert response.json()["errors"] == ["Invalid token."]

        # Log in and use the session token
        response = await _login(async_client, email, password)
        assert response.status_code == status.HTTP_200_OK
        token = response.json()["message"]
        assert response.json()["expiry"]

        response = await async_client.get(
            "/api/auth/me", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.json() == {"email": email, "subject_id": user.id}

    @pytest.mark.asyncio
    async def test_short_complex_password_is_accepted(self, async_client):
        response = await _register(async_client, fake_email(), "P1!")

        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.asyncio
    async def test_duplicate_and_weak_registration_reports_all_errors(self, async_client):
        email = fake_email()
        await _register(async_client, email, "P1!")

        response = await _register(async_client, email, "weak")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "User did not create"
        assert response.json()["errors"] == [
            f"Username '{email}' is already taken.",
            f"Email '{email}' is already taken.",
            "Passwords must have at least one non alphanumeric character.",
            "Passwords must have at least one digit ('0'-'9').",
            "Passwords must have at least one uppercase ('A'-'Z').",
        ]

    @pytest.mark.asyncio
    async def test_confirmation_with_forged_token(
        self, async_client, credential_repository, recording_notifier
    ):
        email = fake_email()
        await _register(async_client, email, "P1!")
        user = await credential_repository.get_by_email(email)

        response = await async_client.get(
            "/api/auth/confirmemail", params={"userid": user.id, "token": "Zm9yZ2Vk"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"] == ["Invalid token."]
        assert (await credential_repository.get_by_id(user.id)).email_confirmed is False

    @pytest.mark.asyncio
    async def test_email_failure_does_not_fail_registration(
        self, async_client, credential_repository
    ):
        failing = RecordingNotifier(fail_with="SMTP connection refused")
        app.dependency_overrides[get_notification_dispatcher] = lambda: NotificationDispatcher(failing)
        email = fake_email()

        with capture_logs() as logs:
            response = await _register(async_client, email, "P1!")

        assert response.status_code == status.HTTP_200_OK
        assert await credential_repository.get_by_email(email) is not None
        assert failing.sent == []
        failures = [e for e in logs if e["event"] == "Notification delivery failed"]
        assert len(failures) == 1
        assert failures[0]["log_level"] == "error"
        assert failures[0]["error"] == "SMTP connection refused"

    @pytest.mark.asyncio
    async def test_notifier_crash_does_not_fail_registration(
        self, async_client, credential_repository
    ):
        crashing = RecordingNotifier(crash_with=ConnectionResetError("peer reset"))
        app.dependency_overrides[get_notification_dispatcher] = lambda: NotificationDispatcher(
            crashing
        )
        email = fake_email()

        with capture_logs() as logs:
            response = await _register(async_client, email, "P1!")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        assert await credential_repository.get_by_email(email) is not None
        crashes = [e for e in logs if e["event"] == "Notification delivery crashed"]
        assert len(crashes) == 1
        assert crashes[0]["error_type"] == "ConnectionResetError"


class TestLogin:
    @pytest.mark.asyncio
    async def test_wrong_password(self, async_client):
        email = fake_email()
        await _register(async_client, email, "P1!")

        response = await _login(async_client, email, "P2!")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Invalid Password"
        assert response.json()["expiry"] is None

    @pytest.mark.asyncio
    async def test_unknown_email(self, async_client):
        response = await _login(async_client, fake_email(), "P1!")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "there is no user with that Email Address"

    @pytest.mark.asyncio
    async def test_token_carries_email_as_sent(self, async_client):
        await _register(async_client, "bob@example.com", "P1!")

        response = await _login(async_client, "Bob@EXAMPLE.COM", "P1!")
        token = response.json()["message"]
        me = await async_client.get(
            "/api/auth/me", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert me.status_code == status.HTTP_200_OK
        assert me.json()["email"] == "Bob@EXAMPLE.COM"


class TestPasswordReset:
    @pytest.mark.asyncio
    async def test_forgot_then_reset(self, async_client, recording_notifier):
        # Arrange
        email, old_password, new_password = fake_email(), "Old1!", "N3w!pass"
        await _register(async_client, email, old_password)

        # Request a reset link
        response = await async_client.post("/api/auth/forgotpassword", json={"email": email})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == (
            "Reset password URL has been sent to the email successfully!"
        )
        assert len(recording_notifier.sent) == 2
        reset_email = recording_notifier.last
        assert reset_email.subject == "Reset Password"
        assert urlsplit(reset_email.link).path == "/api/auth/resetpassword"
        assert reset_email.query_param("email") == email

        # Submit the new password with the token from the link
        response = await async_client.post(
            "/api/auth/resetpassword",
            json={
                "email": reset_email.query_param("email"),
                "token": reset_email.query_param("token"),
                "newPassword": new_password,
                "confirmPassword": new_password,
            },
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Password has been reset successfully"

        # Only the new password works
        assert (await _login(async_client, email, new_password)).status_code == status.HTTP_200_OK
        assert (await _login(async_client, email, old_password)).json()["message"] == (
            "Invalid Password"
        )

    @pytest.mark.asyncio
    async def test_forgot_password_for_unknown_email(self, async_client, recording_notifier):
        response = await async_client.post(
            "/api/auth/forgotpassword", json={"email": fake_email()}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "No user associated with email"
        assert recording_notifier.sent == []

    @pytest.mark.asyncio
    async def test_reset_with_mismatched_confirmation(self, async_client, recording_notifier):
        email = fake_email()
        await _register(async_client, email, "P1!")
        await async_client.post("/api/auth/forgotpassword", json={"email": email})
        token = recording_notifier.last.query_param("token")

        response = await async_client.post(
            "/api/auth/resetpassword",
            json={"email": email, "token": token, "newPassword": "N3w!", "confirmPassword": "N4w!"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Password does not match its confirmation"
        # The token was not consumed
        response = await async_client.post(
            "/api/auth/resetpassword",
            json={"email": email, "token": token, "newPassword": "N3w!", "confirmPassword": "N3w!"},
        )
        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.asyncio
    async def test_confirmation_token_cannot_reset_password(
        self, async_client, recording_notifier
    ):
        email = fake_email()
        await _register(async_client, email, "P1!")
        confirmation_token = recording_notifier.last.query_param("token")

        response = await async_client.post(
            "/api/auth/resetpassword",
            json={
                "email": email,
                "token": confirmation_token,
                "newPassword": "N3w!",
                "confirmPassword": "N3w!",
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Something went wrong"
        assert response.json()["errors"] == ["Invalid token."]
