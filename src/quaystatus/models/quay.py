"""QuayRegistry CRD models."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from quaystatus.crd.base import CRDMetadata, CRDSpec, CRDStatus, parse_conditions
from quaystatus.crd.registry import CRDRegistry


class ComponentKind(str, Enum):
    """Components a QuayRegistry can declare."""

    QUAY = "quay"
    POSTGRES = "postgres"
    CLAIR = "clair"
    CLAIRPOSTGRES = "clairpostgres"
    REDIS = "redis"
    HPA = "horizontalpodautoscaler"
    OBJECTSTORAGE = "objectstorage"
    ROUTE = "route"
    MIRROR = "mirror"
    MONITORING = "monitoring"
    TLS = "tls"


class ConditionType(str, Enum):
    """Condition types written to the QuayRegistry status."""

    AVAILABLE = "Available"
    COMPONENT_QUAY_READY = "ComponentQuayReady"
    COMPONENT_POSTGRES_READY = "ComponentPostgresReady"
    COMPONENT_CLAIR_READY = "ComponentClairReady"
    COMPONENT_CLAIRPOSTGRES_READY = "ComponentClairPostgresReady"
    COMPONENT_REDIS_READY = "ComponentRedisReady"
    COMPONENT_HPA_READY = "ComponentHPAReady"
    COMPONENT_MIRROR_READY = "ComponentMirrorReady"


CONDITION_TYPES = frozenset(t.value for t in ConditionType)
COMPONENT_CONDITION_TYPES = CONDITION_TYPES - {ConditionType.AVAILABLE.value}


class ConditionReason(str, Enum):
    COMPONENT_READY = "ComponentReady"
    COMPONENT_NOT_READY = "ComponentNotReady"
    COMPONENT_UNMANAGED = "ComponentUnmanaged"
    HEALTH_CHECKS_PASSING = "HealthChecksPassing"


class Override(CRDSpec):
    """Per-component deviations from the operator defaults."""

    replicas: Optional[int] = Field(
        default=None, ge=0, description="Explicit replica count for the component"
    )
    volumeSize: Optional[str] = Field(
        default=None, description="Size of the persistent volume, if any"
    )
    env: List[Dict[str, Any]] = Field(
        default_factory=list, description="Extra environment variables"
    )
    labels: Dict[str, str] = Field(
        default_factory=dict, description="Extra labels for the component's pods"
    )
    annotations: Dict[str, str] = Field(
        default_factory=dict, description="Extra annotations for the component's pods"
    )

    class Config:
        extra = "ignore"
        validate_assignment = True


class Component(CRDSpec):
    """A component declared in the QuayRegistry spec."""

    kind: ComponentKind = Field(..., description="Component kind")
    managed: bool = Field(..., description="Whether the operator manages it")
    overrides: Optional[Override] = Field(
        default=None, description="Overrides applied to the component"
    )

    @property
    def scaled_down(self) -> bool:
        """True when the replica count was explicitly set to zero."""
        return self.overrides is not None and self.overrides.replicas == 0

    @property
    def has_replicas_override(self) -> bool:
        return self.overrides is not None and self.overrides.replicas is not None


@CRDRegistry.register("quay.redhat.com", "v1", "QuayRegistry", "quayregistries")
class QuayRegistrySpec(CRDSpec):
    """QuayRegistry CRD specification."""

    configBundleSecret: Optional[str] = Field(
        default=None, description="Secret holding the Quay config bundle"
    )
    components: List[Component] = Field(
        default_factory=list, description="Components of the registry"
    )

    def component(self, kind):
        """Return the declared component of the given kind, or None."""
        return next((c for c in self.components if c.kind == kind), None)

    def is_managed(self, kind) -> bool:
        """Undeclared components count as unmanaged."""
        component = self.component(kind)
        return component is not None and component.managed


class QuayRegistry(BaseModel):
    """A QuayRegistry object as received from the API server."""

    metadata: CRDMetadata
    spec: QuayRegistrySpec = Field(default_factory=QuayRegistrySpec)
    status: CRDStatus = Field(default_factory=CRDStatus)

    class Config:
        extra = "ignore"

    @classmethod
    def from_body(cls, body):
        """Build from a raw object body (e.g. the kopf ``body`` kwarg)."""
        status = dict(body.get("status") or {})
        conditions = parse_conditions(
            status.pop("conditions", None), types=CONDITION_TYPES
        )

        quay = cls.model_validate(
            {
                "metadata": dict(body.get("metadata") or {}),
                "spec": dict(body.get("spec") or {}),
                "status": status,
            }
        )
        quay.status.conditions = conditions
        return quay

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self):
        return self.metadata.namespace

    @property
    def uid(self) -> str:
        return self.metadata.uid

    @property
    def api_version(self) -> str:
        return CRDRegistry.api_version(QuayRegistrySpec)

    @property
    def kind(self) -> str:
        return QuayRegistrySpec._crd_kind

    def resource_name(self, suffix):
        """Name of a managed object created for this registry."""
        return f"{self.name}-{suffix}"
