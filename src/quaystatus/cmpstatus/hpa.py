"""Readiness of the horizontal pod autoscalers."""

import logging

from quaystatus.errors import ResourceNotFoundError
from quaystatus.models.quay import ComponentKind, ConditionType

from .base import Checker

logger = logging.getLogger(__name__)

# Components that get an autoscaler, and the suffix of the object's name.
AUTOSCALED_COMPONENTS = [
    (ComponentKind.QUAY, "quay-app"),
    (ComponentKind.CLAIR, "clair-app"),
    (ComponentKind.MIRROR, "quay-mirror"),
]


class HPA(Checker):
    """Checks that every expected HorizontalPodAutoscaler exists and is owned.

    An autoscaler is expected for an autoscaled component only while that
    component is managed and has no explicit replica count.
    """

    kind = ComponentKind.HPA
    condition_type = ConditionType.COMPONENT_HPA_READY
    display_name = "HorizontalPodAutoscaler"

    async def check(self, quay):
        if not quay.spec.is_managed(self.kind):
            return self.unmanaged()

        for component_kind, suffix in AUTOSCALED_COMPONENTS:
            component = quay.spec.component(component_kind)
            if component is None or not component.managed:
                continue
            if component.has_replicas_override:
                continue

            name = quay.resource_name(suffix)
            try:
                hpa = await self.accessor.get_hpa(quay.namespace, name)
            except ResourceNotFoundError:
                return self.not_ready(f"HorizontalPodAutoscaler {name} not found")

            if not hpa.is_owned_by(quay):
                return self.not_ready(
                    f"HorizontalPodAutoscaler {name} not owned by QuayRegistry"
                )

        return self.ready("Horizontal pod autoscalers found")
