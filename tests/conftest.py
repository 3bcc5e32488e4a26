"""Shared fixtures for camux_gcp tests."""

from typing import Optional

import pytest

from camux.gcp.types import (
    Project,
    ResourceOperationError,
    ServiceAccount,
    ServiceAccountKey,
)

FIXED_TIME = 1760000000.0


class RecordingResources:
    """In-memory remote layer that records every call in order.

    ``fail_at`` is the 0-based index of the call that raises ``error``:
    0 is project creation, 1-5 are the API enablements, 6 is the service
    account and 7 is the key.
    """

    def __init__(self, fail_at: Optional[int] = None, error: Optional[Exception] = None):
        self.calls = []
        self.fail_at = fail_at
        self.error = error or ResourceOperationError("injected failure")

    def _record(self, name, *args):
        if self.fail_at is not None and len(self.calls) == self.fail_at:
            self.calls.append((name, *args))
            raise self.error
        self.calls.append((name, *args))

    @property
    def call_names(self):
        return [call[0] for call in self.calls]

    def create_project(self, request):
        self._record("create_project", request)
        return Project(id=request.project_id, name=request.name, project_number="123456789012")

    def enable_service(self, enablement):
        self._record("enable_service", enablement)
        return enablement

    def create_service_account(self, project_id, account_id, display_name):
        self._record("create_service_account", project_id, account_id, display_name)
        email = f"{account_id}@{project_id}.iam.gserviceaccount.com"
        return ServiceAccount(
            name=f"projects/{project_id}/serviceAccounts/{email}",
            email=email,
            account_id=account_id,
            display_name=display_name,
            project_id=project_id,
        )

    def create_service_account_key(self, service_account_name):
        self._record("create_service_account_key", service_account_name)
        return ServiceAccountKey(name=f"{service_account_name}/keys/abc123", private_key="c2VjcmV0")


@pytest.fixture
def resources():
    return RecordingResources()


@pytest.fixture
def failing_resources():
    """Factory for a RecordingResources that fails at a given call."""

    def _make(fail_at: int, error: Optional[Exception] = None) -> RecordingResources:
        return RecordingResources(fail_at=fail_at, error=error)

    return _make


@pytest.fixture
def clock():
    return lambda: FIXED_TIME


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Point the stack store at a temporary home directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path
