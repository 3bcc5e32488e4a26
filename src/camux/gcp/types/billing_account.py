"""Billing account helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BillingAccount:
    """Information about a GCP billing account.

    Attributes
    ----------
    id : str
        Billing account ID (for example ``"012345-567890-ABCDEF"``).
    display_name : str
        Human-friendly billing account name.
    status : str
        Status indicator such as ``"OPEN"`` or ``"CLOSED"`` (defaults to ``"OPEN"``).
    """

    id: str
    display_name: str
    status: str = "OPEN"

    @property
    def resource_name(self) -> str:
        return f"billingAccounts/{self.id}"


def _billing_account_from_api_response(account: dict) -> BillingAccount:
    """Create a BillingAccount from a Cloud Billing v1 resource."""
    account_id = account.get("name", "").replace("billingAccounts/", "")
    return BillingAccount(
        id=account_id,
        display_name=account.get("displayName", account_id),
        status="OPEN" if account.get("open", False) else "CLOSED",
    )


__all__ = ["BillingAccount", "_billing_account_from_api_response"]
