"""Discover billing accounts and organizations visible to the current credentials.

These helpers back the interactive ``camux_gcp config set`` path, so an operator
who has not configured a billing account can pick one instead of looking it up.
"""

from typing import Optional

import google.auth
from google.auth.credentials import Credentials
from InquirerPy import inquirer
from rich.console import Console

from camux.gcp import _clients
from camux.gcp.types import BillingAccount, ConfigurationError, Organization
from camux.gcp.types.billing_account import _billing_account_from_api_response

console = Console()


def list_billing_accounts(*, credentials: Optional[Credentials] = None) -> list[BillingAccount]:
    """List billing accounts accessible to the given credentials or ADC.

    Args:
        credentials: Google Cloud credentials to use. If None, uses Application Default Credentials.

    Returns:
        List of BillingAccount objects, open and closed

    Raises:
        google.auth.exceptions.DefaultCredentialsError: If no credentials can be found
        googleapiclient.errors.HttpError: If the API call fails
    """
    if credentials is None:
        credentials, _ = google.auth.default()

    billing = _clients.cloud_billing(credentials)

    accounts = []
    request = billing.billingAccounts().list()
    while request is not None:
        response = request.execute()
        for account in response.get("billingAccounts", []):
            accounts.append(_billing_account_from_api_response(account))
        request = billing.billingAccounts().list_next(previous_request=request, previous_response=response)

    return accounts


def list_organizations(*, credentials: Optional[Credentials] = None) -> list[Organization]:
    """List organizations for which the credentials have at least basic permissions.

    Uses Cloud Resource Manager v1 ``organizations.search``; an empty body means
    "search all organizations visible to me".
    """
    if credentials is None:
        credentials, _ = google.auth.default()

    crm = _clients.crm_v1(credentials)

    organizations = []
    request = crm.organizations().search(body={})
    while request is not None:
        response = request.execute()
        for org in response.get("organizations", []):
            organizations.append(
                Organization(
                    id=org["name"].split("/")[1],
                    display_name=org.get("displayName", ""),
                )
            )
        request = crm.organizations().search_next(previous_request=request, previous_response=response)

    return organizations


def choose_billing_account(*, credentials: Optional[Credentials] = None) -> str:
    """Interactively choose a billing account.

    Returns:
        The selected billing account ID

    Raises:
        ConfigurationError: If no billing account is accessible
    """
    accounts = list_billing_accounts(credentials=credentials)

    if not accounts:
        raise ConfigurationError(
            "No billing accounts found. Create one at https://console.cloud.google.com/billing "
            "and then run: camux_gcp config set billingAccount <YOUR_BILLING_ACCOUNT_ID>"
        )

    choices = [
        {"name": f"{account.display_name} ({account.id}) [{account.status}]", "value": account.id}
        for account in accounts
    ]

    return inquirer.select(
        message="Select billing account:",
        choices=choices,
    ).execute()


def choose_organization(*, credentials: Optional[Credentials] = None) -> Optional[str]:
    """Interactively choose an organization.

    Returns:
        The selected organization ID, or None if no organizations are available
    """
    orgs = list_organizations(credentials=credentials)

    if not orgs:
        console.print(
            "[yellow]No organizations found. "
            "Continuing without organization (personal account mode).[/yellow]"
        )
        return None

    choices = [{"name": f"{org.display_name} ({org.id})", "value": org.id} for org in orgs]

    return inquirer.select(
        message="Select organization:",
        choices=choices,
    ).execute()
