"""Decorator attaching Kubernetes API coordinates to pydantic spec models."""

import logging

logger = logging.getLogger(__name__)


class CRDRegistry:
    """Records the group, version, kind and plural of CRD spec models."""

    @staticmethod
    def register(group, version, kind, plural=None, scope="Namespaced"):
        """Decorator to register CRD models.

        Args:
            group: API group (e.g., 'quay.redhat.com')
            version: API version (e.g., 'v1')
            kind: Kind name (e.g., 'QuayRegistry')
            plural: Plural name (defaults to kind.lower() + 's')
            scope: 'Namespaced' or 'Cluster'
        """

        def decorator(model_class):
            model_class._crd_group = group
            model_class._crd_version = version
            model_class._crd_kind = kind
            model_class._crd_plural = plural or f"{kind.lower()}s"
            model_class._crd_scope = scope

            logger.debug(f"Registered CRD: {group}/{version}/{kind}")
            return model_class

        return decorator

    @staticmethod
    def _check(model_class):
        if not hasattr(model_class, "_crd_group"):
            raise ValueError(
                f"Model {model_class.__name__} not decorated with @CRDRegistry.register"
            )

    @staticmethod
    def api_version(model_class):
        """Return the apiVersion string ('group/version') of a registered model."""
        CRDRegistry._check(model_class)
        return f"{model_class._crd_group}/{model_class._crd_version}"

    @staticmethod
    def resource(model_class):
        """Return the (group, version, plural) triple used to address the CRD."""
        CRDRegistry._check(model_class)
        return (
            model_class._crd_group,
            model_class._crd_version,
            model_class._crd_plural,
        )
