"""Organization record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Organization:
    """A GCP organization visible to the current credentials."""

    id: str
    display_name: str

    @property
    def resource_name(self) -> str:
        return f"organizations/{self.id}"


__all__ = ["Organization"]
