from unittest.mock import AsyncMock, Mock

import pytest_asyncio

from src.domain.interfaces.services import IIdentityWorkflowService
from src.infrastructure.dependency_injection.auth_dependencies import (
    get_identity_workflow_service,
)
from src.main import app


@pytest_asyncio.fixture
async def mock_identity_workflow():
    """Replaces the workflow service for every request made by ``async_client``."""
    workflow = Mock(spec=IIdentityWorkflowService)
    for operation in ("register", "login", "confirm_email", "forgot_password", "reset_password"):
        setattr(workflow, operation, AsyncMock())
    app.dependency_overrides[get_identity_workflow_service] = lambda: workflow
    yield workflow
    app.dependency_overrides.pop(get_identity_workflow_service, None)
