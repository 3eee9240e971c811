"""Tests for the WorkflowOutcome envelope."""

from datetime import datetime, timezone

import pytest

from src.core.exceptions import RepositoryError
from src.domain.value_objects.workflow_outcome import WorkflowOutcome


class TestWorkflowOutcome:
    def test_succeeded_carries_expiry(self):
        expiry = datetime(2024, 5, 1, tzinfo=timezone.utc)

        outcome = WorkflowOutcome.succeeded("token", expiry=expiry)

        assert outcome.success is True
        assert outcome.errors == ()
        assert outcome.expiry == expiry

    def test_from_error_keeps_repository_error_order(self):
        error = RepositoryError("User did not create", errors=["b", "a"])

        outcome = WorkflowOutcome.from_error(error)

        assert outcome.success is False
        assert outcome.message == "User did not create"
        assert outcome.errors == ("b", "a")
        assert outcome.expiry is None

    def test_is_immutable(self):
        outcome = WorkflowOutcome.failed("x")

        with pytest.raises(AttributeError):
            outcome.success = True
