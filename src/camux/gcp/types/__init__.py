"""Public exports for camux.gcp types."""

from __future__ import annotations

from .billing_account import BillingAccount
from .configuration import Configuration
from .constants import (
    CONFIG_KEYS,
    DEFAULT_PROJECT_NAME,
    NEXT_STEPS,
    OUTPUT_KEYS,
    REQUIRED_APIS,
    SECRET_OUTPUTS,
    SERVICE_ACCOUNT_DISPLAY_NAME,
    SERVICE_ACCOUNT_ID,
)
from .exceptions import ConfigurationError, ResourceOperationError
from .organization import Organization
from .outputs import Outputs
from .project import Project, ProjectRequest
from .service import ServiceEnablement
from .service_account import ServiceAccount, ServiceAccountKey

__all__ = [
    "CONFIG_KEYS",
    "DEFAULT_PROJECT_NAME",
    "NEXT_STEPS",
    "OUTPUT_KEYS",
    "REQUIRED_APIS",
    "SECRET_OUTPUTS",
    "SERVICE_ACCOUNT_DISPLAY_NAME",
    "SERVICE_ACCOUNT_ID",
    "BillingAccount",
    "Configuration",
    "ConfigurationError",
    "Organization",
    "Outputs",
    "Project",
    "ProjectRequest",
    "ResourceOperationError",
    "ServiceAccount",
    "ServiceAccountKey",
    "ServiceEnablement",
]
