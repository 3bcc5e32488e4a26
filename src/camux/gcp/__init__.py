"""Provision the Google Cloud project behind camux"""

from camux.gcp.config import load_configuration
from camux.gcp.provision import build_project_request, compute_project_id, provision, up
from camux.gcp.resources import CloudResources, DryRunResources
from camux.gcp.types import (
    REQUIRED_APIS,
    Configuration,
    ConfigurationError,
    Outputs,
    Project,
    ProjectRequest,
    ResourceOperationError,
    ServiceAccount,
    ServiceAccountKey,
    ServiceEnablement,
)

__version__ = "0.1.0"


__all__ = [
    "__version__",
    "build_project_request",
    "compute_project_id",
    "load_configuration",
    "provision",
    "up",
    "CloudResources",
    "DryRunResources",
    "REQUIRED_APIS",
    "Configuration",
    "ConfigurationError",
    "Outputs",
    "Project",
    "ProjectRequest",
    "ResourceOperationError",
    "ServiceAccount",
    "ServiceAccountKey",
    "ServiceEnablement",
]
