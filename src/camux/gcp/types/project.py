"""Project records exchanged with Cloud Resource Manager."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProjectRequest:
    """Parameters for creating a GCP project.

    Attributes
    ----------
    name : str
        Human-friendly display name.
    project_id : str
        Globally unique project ID.
    billing_account : str
        Billing account ID attached once the project exists.
    org_id : str, optional
        Parent organization ID. ``None`` means the project has no parent; the
        ``parent`` field is then left out of the request body entirely.
    """

    name: str
    project_id: str
    billing_account: str
    org_id: Optional[str] = None

    def parent_resource_name(self) -> Optional[str]:
        """Return ``organizations/{id}`` or ``None`` when no organization is set."""
        if self.org_id is None:
            return None
        if self.org_id.startswith("organizations/"):
            return self.org_id
        return f"organizations/{self.org_id}"

    def to_body(self) -> dict:
        """Build the CRM v3 ``projects.create`` request body."""
        body = {
            "projectId": self.project_id,
            "displayName": self.name,
        }
        parent = self.parent_resource_name()
        if parent:
            body["parent"] = parent
        return body


@dataclass
class Project:
    """A created GCP project."""

    id: str
    name: str
    project_number: str

    def full_resource_name(self) -> str:
        return f"projects/{self.id}"


def _project_from_api_response(project_dict: dict) -> Project:
    """Create a Project from a CRM v3 project resource."""
    resource_name = project_dict.get("name", "")
    number = resource_name.split("/")[1] if resource_name.startswith("projects/") else ""
    return Project(
        id=project_dict["projectId"],
        name=project_dict.get("displayName", ""),
        project_number=number,
    )


__all__ = ["Project", "ProjectRequest", "_project_from_api_response"]
