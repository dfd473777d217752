"""Component readiness checkers for QuayRegistry."""

from .base import Checker, DeploymentChecker
from .deployments import Clair, ClairPostgres, Postgres, Quay, Redis
from .evaluator import (
    EvaluationResult,
    StatusEvaluator,
    available_condition,
    merge,
    parse_conditions,
    upsert_condition,
)
from .hpa import HPA
from .mirror import Mirror
from .registry import CheckerRegistry

__all__ = [
    "Checker",
    "DeploymentChecker",
    "Clair",
    "ClairPostgres",
    "Postgres",
    "Quay",
    "Redis",
    "HPA",
    "Mirror",
    "CheckerRegistry",
    "EvaluationResult",
    "StatusEvaluator",
    "available_condition",
    "merge",
    "parse_conditions",
    "upsert_condition",
]
