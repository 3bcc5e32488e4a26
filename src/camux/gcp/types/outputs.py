"""Values published at the end of a successful run."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import NEXT_STEPS


@dataclass
class Outputs:
    """The five published outputs of a provisioning run."""

    project_id: str
    project_number: str
    service_account_email: str
    service_account_key: str = field(repr=False)
    next_steps: str = NEXT_STEPS

    def as_dict(self) -> dict[str, str]:
        """Return outputs keyed by their published names."""
        return {
            "projectId": self.project_id,
            "projectNumber": self.project_number,
            "serviceAccountEmail": self.service_account_email,
            "serviceAccountKey": self.service_account_key,
            "nextSteps": self.next_steps,
        }


__all__ = ["Outputs"]
