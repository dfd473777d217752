"""Deployment-backed components other than Mirror."""

from quaystatus.models.quay import ComponentKind, ConditionType

from .base import DeploymentChecker


class Quay(DeploymentChecker):
    kind = ComponentKind.QUAY
    condition_type = ConditionType.COMPONENT_QUAY_READY
    display_name = "Quay"
    deployment_suffix = "quay-app"


class Postgres(DeploymentChecker):
    kind = ComponentKind.POSTGRES
    condition_type = ConditionType.COMPONENT_POSTGRES_READY
    display_name = "Postgres"
    deployment_suffix = "quay-database"


class Clair(DeploymentChecker):
    kind = ComponentKind.CLAIR
    condition_type = ConditionType.COMPONENT_CLAIR_READY
    display_name = "Clair"
    deployment_suffix = "clair-app"


class ClairPostgres(DeploymentChecker):
    kind = ComponentKind.CLAIRPOSTGRES
    condition_type = ConditionType.COMPONENT_CLAIRPOSTGRES_READY
    display_name = "ClairPostgres"
    deployment_suffix = "clair-postgres"


class Redis(DeploymentChecker):
    kind = ComponentKind.REDIS
    condition_type = ConditionType.COMPONENT_REDIS_READY
    display_name = "Redis"
    deployment_suffix = "quay-redis"
