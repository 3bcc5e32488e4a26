"""Tests for the provisioning workflow.

The remote layer is replaced by an in-memory recorder (see conftest.py), so these
tests never touch GCP.
"""

import re
import time

import pytest

from camux.gcp.config import load_configuration
from camux.gcp.provision import build_project_request, compute_project_id, provision, up
from camux.gcp.types import (
    NEXT_STEPS,
    REQUIRED_APIS,
    SERVICE_ACCOUNT_DISPLAY_NAME,
    SERVICE_ACCOUNT_ID,
    Configuration,
    ConfigurationError,
    ResourceOperationError,
)


def test_compute_project_id():
    assert compute_project_id("camux", 1760000000) == "camux-1760000000"
    assert compute_project_id("my-cams", 1760000000.987) == "my-cams-1760000000"


def test_project_id_differs_only_in_timestamp():
    first = compute_project_id("camux", 1760000000)
    second = compute_project_id("camux", 1760000042)
    assert first.rsplit("-", 1)[0] == second.rsplit("-", 1)[0] == "camux"
    assert first != second


def test_build_project_request_without_org_omits_parent():
    config = Configuration(project_name="camux", billing_account="ACME-123", organization_id=None)
    request = build_project_request(config, "camux-1760000000")

    assert request.org_id is None
    assert request.billing_account == "ACME-123"
    assert request.to_body() == {"projectId": "camux-1760000000", "displayName": "camux"}


def test_build_project_request_with_org_keeps_it_verbatim():
    config = Configuration(project_name="camux", billing_account="ACME-123", organization_id="987654321")
    request = build_project_request(config, "camux-1760000000")

    assert request.org_id == "987654321"
    assert request.to_body()["parent"] == "organizations/987654321"


def test_provision_end_to_end(resources, clock):
    """camux / ACME-123 / no org: one project, five APIs, one account, one key."""
    config = load_configuration({"projectName": "camux", "billingAccount": "ACME-123", "organizationId": ""})

    outputs = provision(config, resources, clock=clock)

    assert re.match(r"^camux-\d+$", outputs.project_id)
    assert outputs.project_id == "camux-1760000000"
    assert resources.call_names == (
        ["create_project"]
        + ["enable_service"] * 5
        + ["create_service_account", "create_service_account_key"]
    )

    request = resources.calls[0][1]
    assert request.org_id is None
    assert "parent" not in request.to_body()


def test_provision_outputs(resources, clock):
    config = Configuration(project_name="camux", billing_account="ACME-123")

    outputs = provision(config, resources, clock=clock)

    assert outputs.as_dict() == {
        "projectId": "camux-1760000000",
        "projectNumber": "123456789012",
        "serviceAccountEmail": "camera-viewer-sa@camux-1760000000.iam.gserviceaccount.com",
        "serviceAccountKey": "c2VjcmV0",
        "nextSteps": NEXT_STEPS,
    }
    assert "c2VjcmV0" not in repr(outputs)


def test_provision_enables_each_api_once_scoped_to_project(resources, clock):
    config = Configuration(project_name="camux", billing_account="ACME-123")

    provision(config, resources, clock=clock)

    enablements = [call[1] for call in resources.calls if call[0] == "enable_service"]
    assert [e.service for e in enablements] == list(REQUIRED_APIS)
    assert sorted(e.service for e in enablements) == sorted(
        {
            "smartdevicemanagement.googleapis.com",
            "cloudresourcemanager.googleapis.com",
            "iam.googleapis.com",
            "iap.googleapis.com",
            "iamcredentials.googleapis.com",
        }
    )
    assert {e.project_id for e in enablements} == {"camux-1760000000"}
    names = [e.name for e in enablements]
    assert len(set(names)) == 5
    assert "iam.googleapis.com-api" in names


def test_provision_service_account_and_key(resources, clock):
    config = Configuration(project_name="camux", billing_account="ACME-123")

    provision(config, resources, clock=clock)

    sa_call = resources.calls[6]
    key_call = resources.calls[7]
    assert sa_call == ("create_service_account", "camux-1760000000", SERVICE_ACCOUNT_ID, SERVICE_ACCOUNT_DISPLAY_NAME)
    assert key_call == (
        "create_service_account_key",
        "projects/camux-1760000000/serviceAccounts/camera-viewer-sa@camux-1760000000.iam.gserviceaccount.com",
    )


def test_provision_passes_org_verbatim(resources, clock):
    config = load_configuration({"billingAccount": "ACME-123", "organizationId": "987654321"})

    provision(config, resources, clock=clock)

    assert resources.calls[0][1].org_id == "987654321"


def test_provision_uses_current_time_by_default(resources):
    config = Configuration(project_name="camux", billing_account="ACME-123")

    before = int(time.time())
    outputs = provision(config, resources)
    after = int(time.time())

    timestamp = int(outputs.project_id.split("-")[-1])
    assert before <= timestamp <= after


@pytest.mark.parametrize("fail_at", range(8))
def test_failure_at_any_step_aborts_run(failing_resources, clock, fail_at):
    """The failing step's error surfaces unchanged and no later call is made."""
    error = ResourceOperationError(f"boom at {fail_at}")
    resources = failing_resources(fail_at, error)
    config = Configuration(project_name="camux", billing_account="ACME-123")

    with pytest.raises(ResourceOperationError) as excinfo:
        provision(config, resources, clock=clock)

    assert excinfo.value is error
    assert len(resources.calls) == fail_at + 1


def test_failure_propagates_other_exception_types(failing_resources, clock):
    error = PermissionError("permission denied on billing account")
    resources = failing_resources(0, error)

    with pytest.raises(PermissionError, match="permission denied"):
        provision(Configuration(project_name="camux", billing_account="ACME-123"), resources, clock=clock)


def test_up_missing_billing_makes_no_remote_calls(resources, clock, home):
    with pytest.raises(ConfigurationError, match="billingAccount is required"):
        up({"projectName": "camux", "billingAccount": ""}, resources, stack="dev", clock=clock)

    assert resources.calls == []
    assert not (home / ".config" / "gcloud" / "camux_gcp" / "dev" / "outputs.yaml").exists()


def test_up_saves_outputs_after_success(resources, clock, home):
    outputs = up({"billingAccount": "ACME-123"}, resources, stack="dev", clock=clock)

    outputs_file = home / ".config" / "gcloud" / "camux_gcp" / "dev" / "outputs.yaml"
    assert outputs_file.exists()
    assert outputs.project_id == "camux-1760000000"


def test_up_saves_nothing_on_failure(failing_resources, clock, home):
    resources = failing_resources(7)

    with pytest.raises(ResourceOperationError):
        up({"billingAccount": "ACME-123"}, resources, stack="dev", clock=clock)

    assert not (home / ".config" / "gcloud" / "camux_gcp" / "dev" / "outputs.yaml").exists()


def test_up_without_stack_does_not_save(resources, clock, home):
    up({"billingAccount": "ACME-123"}, resources, clock=clock)

    assert not (home / ".config").exists()
