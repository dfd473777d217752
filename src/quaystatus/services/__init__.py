"""Cluster access services."""

from .accessor import KubernetesAccessor, ResourceAccessor, to_managed_resource

__all__ = ["KubernetesAccessor", "ResourceAccessor", "to_managed_resource"]
