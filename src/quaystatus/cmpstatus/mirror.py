"""Readiness of the repository mirroring workers."""

from quaystatus.models.quay import ComponentKind, ConditionType

from .base import DeploymentChecker


class Mirror(DeploymentChecker):
    """Checks the ``<registry>-quay-mirror`` Deployment."""

    kind = ComponentKind.MIRROR
    condition_type = ConditionType.COMPONENT_MIRROR_READY
    display_name = "Mirror"
    deployment_suffix = "quay-mirror"
