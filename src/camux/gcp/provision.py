"""Provision the GCP project backing a camux deployment.

The workflow creates, in order: the project (with billing and optional
organization), the APIs camux needs, a service account, and a key for that
account. It stops at the first failure and lets the error propagate unchanged;
re-running creates a fresh project under a new timestamped ID.
"""

import time
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Mapping, Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from camux.gcp.config import load_configuration, save_outputs
from camux.gcp.types import (
    NEXT_STEPS,
    REQUIRED_APIS,
    SERVICE_ACCOUNT_DISPLAY_NAME,
    SERVICE_ACCOUNT_ID,
    Configuration,
    Outputs,
    ProjectRequest,
    ServiceEnablement,
)

console = Console()


@contextmanager
def _spinner(description: str) -> Iterator[None]:
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(description=description, total=None)
        yield


def compute_project_id(project_name: str, timestamp: float) -> str:
    """Return ``"{project_name}-{unix seconds}"``."""
    return f"{project_name}-{int(timestamp)}"


def build_project_request(config: Configuration, project_id: str) -> ProjectRequest:
    """Build the project-creation request; the organization is only set when configured."""
    return ProjectRequest(
        name=config.project_name,
        project_id=project_id,
        billing_account=config.billing_account,
        org_id=config.organization_id or None,
    )


def provision(
    config: Configuration,
    resources,
    *,
    clock: Callable[[], float] = time.time,
) -> Outputs:
    """Create the camux project and its supporting resources.

    Args:
        config: The run configuration
        resources: Remote layer providing ``create_project``, ``enable_service``,
            ``create_service_account`` and ``create_service_account_key``
            (`CloudResources` or `DryRunResources`)
        clock: Source of the Unix timestamp used in the project ID

    Returns:
        The published outputs

    Raises:
        Whatever the remote layer raises, unchanged. Nothing is rolled back.
    """
    console.print("\n[yellow]--- Step 1: Project ---[/yellow]")
    project_id = compute_project_id(config.project_name, clock())
    request = build_project_request(config, project_id)
    with _spinner(f"Creating project: {project_id}..."):
        project = resources.create_project(request)
    console.print(f"[green]Project created:[/green] {project.id} ({project.project_number})")

    console.print("\n[yellow]--- Step 2: APIs ---[/yellow]")
    for api in REQUIRED_APIS:
        enablement = ServiceEnablement.for_api(api, project.id)
        with _spinner(f"Enabling {api}..."):
            resources.enable_service(enablement)
        console.print(f"[green]Enabled[/green] {api}")

    console.print("\n[yellow]--- Step 3: Service Account ---[/yellow]")
    with _spinner(f"Creating service account: {SERVICE_ACCOUNT_ID}..."):
        service_account = resources.create_service_account(
            project.id, SERVICE_ACCOUNT_ID, SERVICE_ACCOUNT_DISPLAY_NAME
        )
    console.print(f"[green]Service account created:[/green] {service_account.email}")

    console.print("\n[yellow]--- Step 4: Service Account Key ---[/yellow]")
    with _spinner(f"Creating key for {service_account.email}..."):
        key = resources.create_service_account_key(service_account.name)
    console.print("[green]Service account key created.[/green]")

    return Outputs(
        project_id=project.id,
        project_number=project.project_number,
        service_account_email=service_account.email,
        service_account_key=key.private_key,
        next_steps=NEXT_STEPS,
    )


def up(
    values: Mapping[str, Any],
    resources,
    *,
    stack: Optional[str] = None,
    clock: Callable[[], float] = time.time,
) -> Outputs:
    """Load configuration, provision, then save the outputs to ``stack``.

    Configuration errors are raised before any remote call. Outputs are saved
    only after every step has succeeded.
    """
    config = load_configuration(values)
    outputs = provision(config, resources, clock=clock)
    if stack is not None:
        save_outputs(stack, outputs)
    return outputs
