import os

# Settings are read when ``src`` is first imported.
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("JWT_SIGNING_KEY", "test-signing-key-that-is-at-least-32-chars")
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("APP_URL", "http://testserver/api/auth")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.core.config.settings import settings
from src.domain.services.auth.notification_dispatcher import NotificationDispatcher
from src.domain.services.auth.password_policy import PasswordPolicyValidator
from src.domain.services.auth.session_token import SessionTokenIssuer
from src.domain.value_objects.session_token import SigningConfig
from src.infrastructure.dependency_injection.auth_dependencies import (
    get_credential_repository,
    get_notification_dispatcher,
)
from src.infrastructure.repositories.in_memory_credential_repository import (
    InMemoryCredentialRepository,
)
from src.main import app
from src.utils.security import create_password_context
from tests.utils.notifier import RecordingNotifier


@pytest.fixture
def signing_config() -> SigningConfig:
    return SigningConfig(
        key=settings.JWT_SIGNING_KEY.get_secret_value(),
        issuer=settings.JWT_ISSUER,
        audience=settings.JWT_AUDIENCE,
    )


@pytest.fixture
def session_token_issuer(signing_config) -> SessionTokenIssuer:
    return SessionTokenIssuer(signing_config)


@pytest.fixture
def credential_repository() -> InMemoryCredentialRepository:
    """A fresh repository with a cheap bcrypt work factor."""
    return InMemoryCredentialRepository(
        password_policy=PasswordPolicyValidator(),
        password_context=create_password_context(rounds=4),
    )


@pytest.fixture
def recording_notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest_asyncio.fixture(scope="function")
async def async_client(credential_repository, recording_notifier):
    """HTTP client bound to the app with isolated state.

    Each test gets its own credential repository, and every email is captured
    by ``recording_notifier`` instead of being sent.
    """
    app.dependency_overrides[get_credential_repository] = lambda: credential_repository
    app.dependency_overrides[get_notification_dispatcher] = lambda: NotificationDispatcher(
        recording_notifier
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
