"""Service enablement record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceEnablement:
    """An API enabled on a project.

    ``name`` identifies the enablement itself (``"{service}-api"``) so that each
    API is tracked as a separate managed resource.
    """

    name: str
    service: str
    project_id: str

    @classmethod
    def for_api(cls, service: str, project_id: str) -> "ServiceEnablement":
        return cls(name=f"{service}-api", service=service, project_id=project_id)

    def full_resource_name(self) -> str:
        return f"projects/{self.project_id}/services/{self.service}"


__all__ = ["ServiceEnablement"]
