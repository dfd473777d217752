"""Pydantic models for the QuayRegistry CRD and observed resources."""

from .quay import (
    Component,
    ComponentKind,
    ConditionReason,
    ConditionType,
    Override,
    QuayRegistry,
    QuayRegistrySpec,
)
from .resources import ManagedResource, OwnerReference, ResourceCondition

__all__ = [
    "Component",
    "ComponentKind",
    "ConditionReason",
    "ConditionType",
    "Override",
    "QuayRegistry",
    "QuayRegistrySpec",
    "ManagedResource",
    "OwnerReference",
    "ResourceCondition",
]
