"""Read-only access to the workload objects backing registry components."""

import asyncio
import logging
from abc import ABC, abstractmethod

import kubernetes
import urllib3
from kubernetes.client.exceptions import ApiException
from pydantic import ValidationError

from quaystatus.errors import (
    AccessorError,
    MalformedResourceError,
    ResourceNotFoundError,
)
from quaystatus.models.resources import (
    ManagedResource,
    OwnerReference,
    ResourceCondition,
)

logger = logging.getLogger(__name__)


class ResourceAccessor(ABC):
    """Looks up managed objects by namespace and name.

    Implementations raise ResourceNotFoundError when the object does not exist
    and an InfrastructureError for anything else that goes wrong.
    """

    @abstractmethod
    async def get_deployment(self, namespace, name) -> ManagedResource:
        pass

    @abstractmethod
    async def get_hpa(self, namespace, name) -> ManagedResource:
        pass


class KubernetesAccessor(ResourceAccessor):
    """Accessor backed by the official kubernetes client.

    The client is blocking, so each call runs in a worker thread and carries a
    request timeout that bounds how long the thread can outlive a cancelled
    caller.
    """

    def __init__(self, apps_api=None, autoscaling_api=None, request_timeout=None):
        self._apps = apps_api or kubernetes.client.AppsV1Api()
        self._autoscaling = autoscaling_api or kubernetes.client.AutoscalingV2Api()
        self._request_timeout = request_timeout

    async def get_deployment(self, namespace, name):
        obj = await self._read(
            "Deployment", self._apps.read_namespaced_deployment, namespace, name
        )
        return to_managed_resource(obj, available=_deployment_available)

    async def get_hpa(self, namespace, name):
        obj = await self._read(
            "HorizontalPodAutoscaler",
            self._autoscaling.read_namespaced_horizontal_pod_autoscaler,
            namespace,
            name,
        )
        return to_managed_resource(obj, available=_hpa_available)

    async def _read(self, kind, reader, namespace, name):
        kwargs = {"name": name, "namespace": namespace}
        if self._request_timeout is not None:
            kwargs["_request_timeout"] = self._request_timeout

        try:
            return await asyncio.to_thread(reader, **kwargs)
        except ApiException as e:
            if e.status == 404:
                logger.debug(f"{kind} {namespace}/{name} not found")
                raise ResourceNotFoundError(kind, namespace, name) from e
            logger.error(f"Failed to read {kind} {namespace}/{name}: {e.status} {e.reason}")
            raise AccessorError(kind, namespace, name, e) from e
        except urllib3.exceptions.HTTPError as e:
            logger.error(f"Cluster API unreachable reading {kind} {namespace}/{name}: {e}")
            raise AccessorError(kind, namespace, name, e) from e


def _deployment_available(status):
    return status.available_replicas


def _hpa_available(status):
    return status.current_replicas


def to_managed_resource(obj, available=_deployment_available):
    """Convert a kubernetes client model into a ManagedResource snapshot."""
    metadata = getattr(obj, "metadata", None)
    if metadata is None or not metadata.name:
        raise MalformedResourceError(f"Object without metadata.name: {obj!r}")

    owner_refs = [
        OwnerReference(
            apiVersion=ref.api_version or "",
            kind=ref.kind or "",
            name=ref.name or "",
            uid=ref.uid or "",
            controller=ref.controller,
            blockOwnerDeletion=ref.block_owner_deletion,
        )
        for ref in metadata.owner_references or []
    ]

    status = getattr(obj, "status", None)
    conditions = []
    available_replicas = 0
    if status is not None:
        available_replicas = available(status) or 0
        for cond in status.conditions or []:
            if not cond.type:
                raise MalformedResourceError(
                    f"Condition without type on {metadata.name}"
                )
            try:
                conditions.append(
                    ResourceCondition(
                        type=cond.type,
                        status=cond.status or "Unknown",
                        message=cond.message or "",
                    )
                )
            except ValidationError as e:
                raise MalformedResourceError(
                    f"Invalid condition {cond.type} on {metadata.name}: {e}"
                ) from e

    return ManagedResource(
        name=metadata.name,
        namespace=metadata.namespace,
        ownerReferences=owner_refs,
        availableReplicas=available_replicas,
        conditions=conditions,
    )
