"""Internal helpers to construct Google API service clients.

Every remote call made by camux_gcp goes through one of these builders, so tests
can swap a builder for a fake service without touching discovery.
"""

from __future__ import annotations

from google.auth.credentials import Credentials
from googleapiclient import discovery


def _build(api: str, version: str, credentials: Credentials):
    return discovery.build(api, version, credentials=credentials, cache_discovery=False)


def crm_v1(credentials: Credentials):
    """Cloud Resource Manager v1 (organization search)."""
    return _build("cloudresourcemanager", "v1", credentials)


def crm_v3(credentials: Credentials):
    """Cloud Resource Manager v3 (project creation)."""
    return _build("cloudresourcemanager", "v3", credentials)


def iam_v1(credentials: Credentials):
    """IAM v1 (service accounts and keys)."""
    return _build("iam", "v1", credentials)


def service_usage(credentials: Credentials):
    """Service Usage v1 (API enablement)."""
    return _build("serviceusage", "v1", credentials)


def cloud_billing(credentials: Credentials):
    """Cloud Billing v1 (billing accounts and project billing info)."""
    return _build("cloudbilling", "v1", credentials)
