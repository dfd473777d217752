"""Shared fixtures: an in-memory accessor and QuayRegistry builders."""

import asyncio

import pytest

from quaystatus.errors import ResourceNotFoundError
from quaystatus.models.quay import QuayRegistry
from quaystatus.models.resources import (
    ManagedResource,
    OwnerReference,
    ResourceCondition,
)
from quaystatus.services.accessor import ResourceAccessor


class FakeAccessor(ResourceAccessor):
    """Serves objects from dictionaries keyed by name and records lookups."""

    def __init__(self, deployments=None, hpas=None, errors=None, delay=0):
        self.deployments = {d.name: d for d in deployments or []}
        self.hpas = {h.name: h for h in hpas or []}
        self.errors = errors or {}
        self.delay = delay
        self.calls = []

    async def _get(self, kind, store, namespace, name):
        self.calls.append((kind, namespace, name))
        if self.delay:
            await asyncio.sleep(self.delay)
        if name in self.errors:
            raise self.errors[name]
        if name not in store:
            raise ResourceNotFoundError(kind, namespace, name)
        return store[name]

    async def get_deployment(self, namespace, name):
        return await self._get("Deployment", self.deployments, namespace, name)

    async def get_hpa(self, namespace, name):
        return await self._get("HorizontalPodAutoscaler", self.hpas, namespace, name)


def registry_owner(name="registry", uid="uid"):
    return OwnerReference(
        kind="QuayRegistry",
        name=name,
        apiVersion="quay.redhat.com/v1",
        uid=uid,
    )


def make_resource(name, owned=True, available=None, message="", owners=None):
    """Build a resource snapshot.

    ``available`` is the status of the Available condition, or None to leave
    the condition out.
    """
    if owners is None:
        owners = [registry_owner()] if owned else []
    conditions = []
    if available is not None:
        conditions.append(
            ResourceCondition(type="Available", status=available, message=message)
        )
    return ManagedResource(
        name=name,
        namespace="quay",
        ownerReferences=owners,
        availableReplicas=1,
        conditions=conditions,
    )


def make_quay(*components, name="registry", uid="uid", conditions=None):
    """Build a QuayRegistry from (kind, managed[, replicas]) tuples."""
    declared = []
    for component in components:
        kind, managed = component[0], component[1]
        entry = {"kind": kind, "managed": managed}
        if len(component) > 2:
            entry["overrides"] = {"replicas": component[2]}
        declared.append(entry)

    body = {
        "apiVersion": "quay.redhat.com/v1",
        "kind": "QuayRegistry",
        "metadata": {"name": name, "namespace": "quay", "uid": uid},
        "spec": {"components": declared},
        "status": {"conditions": conditions or []},
    }
    return QuayRegistry.from_body(body)


@pytest.fixture
def accessor():
    return FakeAccessor()
