"""CLI entry point for camux_gcp."""

import json
import sys
from typing import Optional

import typer
from googleapiclient.errors import HttpError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from camux.gcp import admin
from camux.gcp import config as stack_config
from camux.gcp.provision import up as provision_up
from camux.gcp.resources import CloudResources, DryRunResources
from camux.gcp.types import (
    CONFIG_KEYS,
    OUTPUT_KEYS,
    SECRET_OUTPUTS,
    ConfigurationError,
    ResourceOperationError,
)

app = typer.Typer(
    help="Provision the Google Cloud project behind camux",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Manage stack configuration", no_args_is_help=True)
app.add_typer(config_app, name="config")
console = Console()

SECRET_MASK = "********"

STACK_OPTION = typer.Option(
    stack_config.DEFAULT_STACK,
    "--stack",
    "-s",
    help="The stack whose configuration and outputs to use",
)


def _fail(message: str, code: int = 1) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
    sys.exit(code)


def _display_value(key: str, value: str, show_secrets: bool) -> str:
    if key in SECRET_OUTPUTS and not show_secrets:
        return SECRET_MASK
    return value


def _outputs_table(outputs: dict[str, str], show_secrets: bool) -> Table:
    table = Table(title="Outputs", show_header=True, header_style="bold cyan")
    table.add_column("Name")
    table.add_column("Value", overflow="fold")
    for key in OUTPUT_KEYS:
        if key == "nextSteps" or key not in outputs:
            continue
        table.add_row(key, escape(_display_value(key, outputs[key], show_secrets)))
    return table


@app.command("version")
def version():
    """Show the version of camux_gcp."""
    from camux.gcp import __version__

    console.print(f"camux_gcp version: [bold green]{__version__}[/bold green]")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help=f"One of: {', '.join(CONFIG_KEYS)}"),
    value: Optional[str] = typer.Argument(
        None,
        help="The value (billingAccount and organizationId are chosen interactively if omitted)",
    ),
    stack: str = STACK_OPTION,
):
    """Set a configuration value for a stack."""
    try:
        if value is None:
            if key == "billingAccount":
                value = admin.choose_billing_account()
            elif key == "organizationId":
                value = admin.choose_organization()
                if value is None:
                    return
            else:
                raise typer.BadParameter(f"A value is required for '{key}'", param_hint="VALUE")
        config_file = stack_config.set_config_value(stack, key, value)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="KEY") from e
    except ConfigurationError as e:
        _fail(str(e))

    console.print(f"[green]Set[/green] {key} = {value} [dim]({config_file})[/dim]")


@config_app.command("get")
def config_get(
    key: str = typer.Argument(..., help=f"One of: {', '.join(CONFIG_KEYS)}"),
    stack: str = STACK_OPTION,
):
    """Print a configuration value for a stack."""
    value = stack_config.get_config_value(stack, key)
    if value is None:
        _fail(f"Configuration key '{key}' is not set for stack '{stack}'.")
    typer.echo(value)


@config_app.command("unset")
def config_unset(
    key: str = typer.Argument(..., help=f"One of: {', '.join(CONFIG_KEYS)}"),
    stack: str = STACK_OPTION,
):
    """Remove a configuration value from a stack."""
    if stack_config.unset_config_value(stack, key):
        console.print(f"[green]Removed[/green] {key}")
    else:
        console.print(f"[yellow]{key} was not set.[/yellow]")


@config_app.command("list")
def config_list(stack: str = STACK_OPTION):
    """List the configuration of a stack."""
    values = stack_config.load_stack_config(stack)

    table = Table(title=f"Stack: {stack}", show_header=True, header_style="bold cyan")
    table.add_column("Key")
    table.add_column("Value")
    for key in CONFIG_KEYS:
        table.add_row(key, values.get(key, "[dim](unset)[/dim]"))
    console.print(table)


@app.command("up")
def up(
    stack: str = STACK_OPTION,
    project_name: Optional[str] = typer.Option(
        None,
        "--name",
        help="Project name and ID prefix (overrides projectName)",
    ),
    billing_id: Optional[str] = typer.Option(
        None,
        "--billing",
        "-b",
        help="The billing account ID (overrides billingAccount)",
    ),
    org_id: Optional[str] = typer.Option(
        None,
        "--org",
        "-o",
        help="The organization ID (overrides organizationId)",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Show what would be created without making changes",
    ),
    show_secrets: bool = typer.Option(
        False,
        "--show-secrets",
        help="Print the service account key instead of masking it",
    ),
):
    """
    Create the camux project, enable its APIs, and create a service account and key.

    Every run creates a new project named '<projectName>-<unix timestamp>'.
    The first failing step stops the run; nothing is rolled back.

    Examples:
        # Configure once, then provision
        camux_gcp config set billingAccount 0X0X0X-0X0X0X-0X0X0X
        camux_gcp up

        # Dry run to see what would happen
        camux_gcp up --dry-run
    """
    values = dict(stack_config.load_stack_config(stack))
    overrides = {"projectName": project_name, "billingAccount": billing_id, "organizationId": org_id}
    values.update({key: value for key, value in overrides.items() if value is not None})

    resources = DryRunResources() if dry_run else CloudResources()

    try:
        outputs = provision_up(values, resources, stack=None if dry_run else stack)
    except (ConfigurationError, ResourceOperationError, TimeoutError, HttpError) as e:
        _fail(str(e))
    except KeyboardInterrupt:
        console.print("\n[yellow]Provisioning interrupted by user.[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[bold red]Unexpected error:[/bold red] {escape(str(e))}", highlight=False)
        sys.exit(1)

    status_text = "Dry Run Complete!" if dry_run else "Provisioning Successful!"
    color = "yellow" if dry_run else "green"
    console.print(
        Panel.fit(
            f"[bold {color}]{status_text}[/bold {color}]\n\n"
            f"Stack: {stack}\n"
            f"Project ID: {outputs.project_id}\n"
            f"Service Account: {outputs.service_account_email}",
            border_style=color,
        )
    )
    console.print(_outputs_table(outputs.as_dict(), show_secrets))
    console.print(Panel(outputs.next_steps.strip(), title="Next steps", border_style="cyan"))


@app.command("outputs")
def outputs(
    name: Optional[str] = typer.Argument(None, help="Print a single output value"),
    stack: str = STACK_OPTION,
    show_secrets: bool = typer.Option(False, "--show-secrets", help="Print secret outputs in plain text"),
    as_json: bool = typer.Option(False, "--json", help="Print outputs as JSON"),
):
    """Show the outputs of the last successful run of a stack."""
    try:
        saved = stack_config.load_outputs(stack)
    except FileNotFoundError as e:
        _fail(str(e))

    if name is not None:
        if name not in saved:
            _fail(f"Unknown output '{name}'. Expected one of: {', '.join(OUTPUT_KEYS)}")
        typer.echo(_display_value(name, saved[name], show_secrets))
        return

    if as_json:
        shown = {key: _display_value(key, value, show_secrets) for key, value in saved.items()}
        typer.echo(json.dumps(shown, indent=2))
        return

    console.print(_outputs_table(saved, show_secrets))
    if "nextSteps" in saved:
        console.print(Panel(saved["nextSteps"].strip(), title="Next steps", border_style="cyan"))


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
