"""Observed state of managed workload objects."""

from typing import List, Optional

from pydantic import BaseModel, Field

from quaystatus.crd.base import ConditionStatus


class OwnerReference(BaseModel):
    """Backlink from a managed object to the object controlling it."""

    apiVersion: str = ""
    kind: str = ""
    name: str = ""
    uid: str = ""
    controller: Optional[bool] = None
    blockOwnerDeletion: Optional[bool] = None

    def points_to(self, kind, name, api_version, uid) -> bool:
        return (
            self.kind == kind
            and self.name == name
            and self.apiVersion == api_version
            and self.uid == uid
        )


class ResourceCondition(BaseModel):
    """A condition reported in a workload object's status."""

    type: str
    status: ConditionStatus = ConditionStatus.UNKNOWN
    message: str = ""


class ManagedResource(BaseModel):
    """Snapshot of a Deployment or HorizontalPodAutoscaler."""

    name: str
    namespace: Optional[str] = None
    ownerReferences: List[OwnerReference] = Field(default_factory=list)
    availableReplicas: int = 0
    conditions: List[ResourceCondition] = Field(default_factory=list)

    def get_condition(self, type):
        return next((c for c in self.conditions if c.type == type), None)

    def is_owned_by(self, quay) -> bool:
        """True when one owner reference matches the registry exactly.

        Name alone is not enough: an unrelated object with the expected name
        must not be mistaken for one the registry created.
        """
        return any(
            ref.points_to(quay.kind, quay.name, quay.api_version, quay.uid)
            for ref in self.ownerReferences
        )
