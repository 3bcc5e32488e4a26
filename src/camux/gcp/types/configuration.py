"""Run configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Configuration:
    """Immutable configuration for a single provisioning run.

    Attributes
    ----------
    project_name : str
        Display name of the project and prefix of its generated ID.
    billing_account : str
        Billing account ID attached to the new project.
    organization_id : str, optional
        Parent organization ID; ``None`` creates the project without a parent.
    """

    project_name: str
    billing_account: str
    organization_id: Optional[str] = None


__all__ = ["Configuration"]
