"""Base checker architecture for component readiness."""

from abc import ABC, abstractmethod
import logging

from quaystatus.crd.base import Condition, ConditionStatus
from quaystatus.errors import ResourceNotFoundError
from quaystatus.models.quay import ConditionReason

logger = logging.getLogger(__name__)


class Checker(ABC):
    """Classifies the health of one component kind into a Condition.

    Domain outcomes (unmanaged, missing, degraded...) are always returned as a
    Condition. Exceptions are reserved for failures to observe the cluster.
    """

    def __init__(self, accessor):
        self.accessor = accessor

    @property
    @abstractmethod
    def kind(self):
        """ComponentKind this checker evaluates."""
        pass

    @property
    @abstractmethod
    def condition_type(self):
        """ConditionType produced by this checker."""
        pass

    @property
    @abstractmethod
    def display_name(self):
        """Component name used in condition messages."""
        pass

    @abstractmethod
    async def check(self, quay) -> Condition:
        """Evaluate the component of the given QuayRegistry."""
        pass

    def condition(self, status, reason, message):
        return Condition.new(self.condition_type, status, reason, message)

    def ready(self, message):
        return self.condition(
            ConditionStatus.TRUE, ConditionReason.COMPONENT_READY, message
        )

    def not_ready(self, message):
        return self.condition(
            ConditionStatus.FALSE, ConditionReason.COMPONENT_NOT_READY, message
        )

    def unmanaged(self):
        return self.condition(
            ConditionStatus.TRUE,
            ConditionReason.COMPONENT_UNMANAGED,
            f"{self.display_name} not managed by the operator",
        )


class DeploymentChecker(Checker):
    """Checker for components backed by a single Deployment.

    Steps run in a fixed order and the first one that decides wins:
    unmanaged, missing, not owned, scaled down, availability.
    """

    @property
    @abstractmethod
    def deployment_suffix(self):
        """Suffix appended to the registry name to form the Deployment name."""
        pass

    @property
    def ready_message(self):
        return f"{self.display_name} component healthy"

    async def check(self, quay):
        component = quay.spec.component(self.kind)
        if component is None or not component.managed:
            logger.debug(f"{quay.name}: {self.kind} unmanaged")
            return self.unmanaged()

        name = quay.resource_name(self.deployment_suffix)
        try:
            deployment = await self.accessor.get_deployment(quay.namespace, name)
        except ResourceNotFoundError:
            logger.debug(f"{quay.name}: deployment {name} not found")
            return self.not_ready(f"{self.display_name} deployment not found")

        if not deployment.is_owned_by(quay):
            logger.debug(f"{quay.name}: deployment {name} not owned")
            return self.not_ready(
                f"{self.display_name} deployment not owned by QuayRegistry"
            )

        if component.scaled_down:
            return self.ready(f"{self.display_name} manually scaled down")

        return self.availability(deployment)

    def availability(self, deployment):
        """Map the Deployment's Available condition onto a Condition.

        Only an explicit Available=True counts as ready; a Deployment that has
        not reported availability yet is treated as not ready.
        """
        available = deployment.get_condition("Available")
        if available is None:
            return self.not_ready(
                f"Deployment {deployment.name}: availability not reported"
            )

        if available.status != ConditionStatus.TRUE:
            message = available.message or "availability not reported"
            return self.not_ready(f"Deployment {deployment.name}: {message}")

        return self.ready(self.ready_message)
