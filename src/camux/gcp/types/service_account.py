"""Service account and key records."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ServiceAccount:
    """Information about a GCP service account.

    Attributes
    ----------
    name : str
        Full resource name (``projects/{project}/serviceAccounts/{email}``).
    email : str
        Server-assigned service account email.
    account_id : str
        The short account ID the account was created with.
    display_name : str
        Human-friendly label.
    project_id : str
        Owning project ID.
    """

    name: str
    email: str
    account_id: str
    display_name: str
    project_id: str


@dataclass
class ServiceAccountKey:
    """A server-generated service account key.

    ``private_key`` holds the base64-encoded JSON key file exactly as returned by
    the IAM API. It is excluded from ``repr`` so it does not leak into logs.
    """

    name: str
    private_key: str = field(repr=False)


__all__ = ["ServiceAccount", "ServiceAccountKey"]
