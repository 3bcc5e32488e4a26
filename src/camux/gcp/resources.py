"""Remote resource-management layer.

`CloudResources` issues the create calls against Google Cloud APIs and waits for
their long-running operations to finish. `DryRunResources` exposes the same
methods but only reports what would be created.
"""

from __future__ import annotations

from typing import Callable, Optional

import backoff
import google.auth
from google.auth.credentials import Credentials
from rich.console import Console

from camux.gcp import _clients
from camux.gcp.types import (
    Project,
    ProjectRequest,
    ResourceOperationError,
    ServiceAccount,
    ServiceAccountKey,
    ServiceEnablement,
)
from camux.gcp.types.project import _project_from_api_response

console = Console()

PENDING = "<pending>"


def _operation_pending(operation: dict) -> bool:
    return not operation.get("done", False)


def _raise_for_operation_error(operation: dict, action: str) -> None:
    if "error" in operation:
        error = operation["error"]
        raise ResourceOperationError(
            f"{action} failed with error code {error.get('code', 'Unknown')}: "
            f"{error.get('message', 'Unknown error')}"
        )


class CloudResources:
    """Create camux resources through the Google Cloud APIs.

    Parameters
    ----------
    credentials : Credentials, optional
        Explicit credentials. If ``None``, Application Default Credentials are used.
    timeout : float, default 600.0
        Max seconds to wait for each long-running operation.
    polling_interval : float, default 5.0
        Seconds between operation polls.

    Notes
    -----
    Failed calls are never retried. ``googleapiclient.errors.HttpError`` propagates
    as raised by the client library.
    """

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        *,
        timeout: float = 600.0,
        polling_interval: float = 5.0,
    ) -> None:
        self._credentials = credentials
        self.timeout = timeout
        self.polling_interval = polling_interval

    def _get_credentials(self) -> Credentials:
        """Get credentials for API calls (explicit > ADC)."""
        if self._credentials is None:
            self._credentials, _ = google.auth.default()
        return self._credentials

    def _wait(self, operation: dict, fetch: Callable[[str], dict], action: str) -> dict:
        """Poll a long-running operation until it is done.

        Raises:
            TimeoutError: If the operation is still running after ``timeout`` seconds
            ResourceOperationError: If the operation completes with an error
        """
        if _operation_pending(operation):
            name = operation.get("name")
            poll = backoff.on_predicate(
                backoff.constant,
                predicate=_operation_pending,
                max_time=self.timeout,
                jitter=None,
                interval=self.polling_interval,
            )(lambda: fetch(name))
            operation = poll()
            if _operation_pending(operation):
                raise TimeoutError(f"{action} timed out after {self.timeout} seconds. Operation name: {name}")

        _raise_for_operation_error(operation, action)
        return operation

    def create_project(self, request: ProjectRequest) -> Project:
        """Create a project and attach its billing account.

        Returns:
            The created project, including its server-assigned number

        Raises:
            googleapiclient.errors.HttpError: If any API call fails
            ResourceOperationError: If the create operation completes with an error
            TimeoutError: If creation does not complete within ``timeout`` seconds
        """
        creds = self._get_credentials()
        crm = _clients.crm_v3(creds)

        operation = crm.projects().create(body=request.to_body()).execute()
        operation = self._wait(
            operation,
            lambda name: crm.operations().get(name=name).execute(),
            f"Project creation ({request.project_id})",
        )

        response = operation.get("response") or {}
        if "projectId" not in response:
            response = crm.projects().get(name=f"projects/{request.project_id}").execute()
        project = _project_from_api_response(response)

        billing = _clients.cloud_billing(creds)
        billing_id = request.billing_account.replace("billingAccounts/", "")
        billing.projects().updateBillingInfo(
            name=project.full_resource_name(),
            body={"billingAccountName": f"billingAccounts/{billing_id}"},
        ).execute()

        return project

    def enable_service(self, enablement: ServiceEnablement) -> ServiceEnablement:
        """Enable one API on a project.

        Raises:
            googleapiclient.errors.HttpError: If the API call fails
            ResourceOperationError: If the enable operation completes with an error
            TimeoutError: If enablement does not complete within ``timeout`` seconds
        """
        service_usage_client = _clients.service_usage(self._get_credentials())

        operation = (
            service_usage_client.services()
            .enable(name=enablement.full_resource_name(), body={})
            .execute()
        )
        self._wait(
            operation,
            lambda name: service_usage_client.operations().get(name=name).execute(),
            f"Enabling {enablement.service}",
        )
        return enablement

    def create_service_account(self, project_id: str, account_id: str, display_name: str) -> ServiceAccount:
        """Create a service account in a project."""
        iam = _clients.iam_v1(self._get_credentials())

        account = (
            iam.projects()
            .serviceAccounts()
            .create(
                name=f"projects/{project_id}",
                body={"accountId": account_id, "serviceAccount": {"displayName": display_name}},
            )
            .execute()
        )
        return ServiceAccount(
            name=account["name"],
            email=account["email"],
            account_id=account_id,
            display_name=account.get("displayName", display_name),
            project_id=project_id,
        )

    def create_service_account_key(self, service_account_name: str) -> ServiceAccountKey:
        """Create a key for a service account; key material is generated server-side."""
        iam = _clients.iam_v1(self._get_credentials())

        key = iam.projects().serviceAccounts().keys().create(name=service_account_name, body={}).execute()
        return ServiceAccountKey(name=key["name"], private_key=key["privateKeyData"])


class DryRunResources:
    """Report what would be created without calling any API."""

    def create_project(self, request: ProjectRequest) -> Project:
        parent = request.parent_resource_name() or "no org"
        console.print(
            f"[dim][DRY RUN] Would create project: {request.project_id} ({parent}) "
            f"with billing account {request.billing_account}[/dim]"
        )
        return Project(id=request.project_id, name=request.name, project_number=PENDING)

    def enable_service(self, enablement: ServiceEnablement) -> ServiceEnablement:
        console.print(f"[dim][DRY RUN] Would enable {enablement.service} on {enablement.project_id}[/dim]")
        return enablement

    def create_service_account(self, project_id: str, account_id: str, display_name: str) -> ServiceAccount:
        email = f"{account_id}@{project_id}.iam.gserviceaccount.com"
        console.print(f"[dim][DRY RUN] Would create service account: {email}[/dim]")
        return ServiceAccount(
            name=f"projects/{project_id}/serviceAccounts/{email}",
            email=email,
            account_id=account_id,
            display_name=display_name,
            project_id=project_id,
        )

    def create_service_account_key(self, service_account_name: str) -> ServiceAccountKey:
        console.print(f"[dim][DRY RUN] Would create key for {service_account_name}[/dim]")
        return ServiceAccountKey(name=f"{service_account_name}/keys/{PENDING}", private_key=PENDING)


__all__ = ["CloudResources", "DryRunResources", "PENDING"]
