"""Runs component checkers and merges their conditions into the status."""

import asyncio
from dataclasses import dataclass, field
import logging
from typing import Dict, List, Optional, Set

from quaystatus.crd.base import (
    Condition,
    ConditionStatus,
    condition_type,
    parse_conditions,
)
from quaystatus.errors import CheckTimeoutError
from quaystatus.models.quay import (
    COMPONENT_CONDITION_TYPES,
    ConditionReason,
    ConditionType,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass
class EvaluationResult:
    """Outcome of one evaluation pass over a QuayRegistry."""

    conditions: List[Condition] = field(default_factory=list)
    errors: Dict[str, Exception] = field(default_factory=dict)
    # Condition types of every checker that ran, failed ones included. None
    # leaves stored component conditions unpruned.
    condition_types: Optional[Set[str]] = None

    @property
    def complete(self) -> bool:
        return not self.errors


class StatusEvaluator:
    """Evaluates every declared component of a QuayRegistry.

    Checkers run concurrently, each bounded by ``timeout`` seconds. A checker
    that fails to observe the cluster is reported in ``EvaluationResult.errors``
    and does not stop the others.
    """

    def __init__(self, registry, timeout=DEFAULT_TIMEOUT):
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be > 0")
        self.registry = registry
        self.timeout = timeout

    async def evaluate(self, quay):
        kinds = []
        for component in quay.spec.components:
            if component.kind in kinds:
                continue
            if not self.registry.has_checker(component.kind):
                logger.debug(f"{quay.name}: no checker for {component.kind.value}")
                continue
            kinds.append(component.kind)

        outcomes = await asyncio.gather(
            *(self._run(kind, quay) for kind in kinds), return_exceptions=True
        )

        result = EvaluationResult(
            condition_types={
                ConditionType(self.registry.get_checker(kind).condition_type).value
                for kind in kinds
            }
        )
        for kind, outcome in zip(kinds, outcomes):
            if isinstance(outcome, BaseException) and not isinstance(outcome, Exception):
                raise outcome
            if isinstance(outcome, Exception):
                logger.warning(
                    f"{quay.name}: could not evaluate {kind.value}: {outcome}"
                )
                result.errors[kind.value] = outcome
            else:
                result.conditions.append(outcome)
        return result

    async def _run(self, kind, quay):
        checker = self.registry.get_checker(kind)
        if self.timeout is None:
            return await checker.check(quay)
        try:
            return await asyncio.wait_for(checker.check(quay), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise CheckTimeoutError(kind.value, self.timeout) from e


def upsert_condition(conditions, condition):
    """Insert ``condition`` or replace the entry with the same type, in place.

    The stored ``lastUpdateTime`` never moves backwards, and
    ``lastTransitionTime`` is only reset when the status changes. Stored
    entries that could not be parsed are replaced outright.
    """
    for index, existing in enumerate(conditions):
        if condition_type(existing) != condition.type:
            continue

        updates = {"lastTransitionTime": condition.lastUpdateTime}
        if isinstance(existing, Condition):
            if (
                existing.lastUpdateTime is not None
                and condition.lastUpdateTime is not None
                and existing.lastUpdateTime > condition.lastUpdateTime
            ):
                updates["lastUpdateTime"] = existing.lastUpdateTime
            if existing.status == condition.status:
                updates["lastTransitionTime"] = (
                    existing.lastTransitionTime
                    or existing.lastUpdateTime
                    or condition.lastUpdateTime
                )
        conditions[index] = condition.model_copy(update=updates)
        return conditions

    conditions.append(
        condition.model_copy(
            update={
                "lastTransitionTime": condition.lastTransitionTime
                or condition.lastUpdateTime
            }
        )
    )
    return conditions


def available_condition(conditions) -> Optional[Condition]:
    """Summarise component conditions into the registry's Available condition."""
    component_conditions = [
        c for c in conditions if c.type != ConditionType.AVAILABLE.value
    ]
    for condition in component_conditions:
        if not condition.is_true:
            component = condition.type.removeprefix("Component").removesuffix("Ready")
            return Condition.new(
                ConditionType.AVAILABLE,
                ConditionStatus.FALSE,
                ConditionReason.COMPONENT_NOT_READY,
                f"Awaiting for component {component} to become available",
            )
    return Condition.new(
        ConditionType.AVAILABLE,
        ConditionStatus.TRUE,
        ConditionReason.HEALTH_CHECKS_PASSING,
        "All components reporting as healthy",
    )


def merge(existing, result):
    """Apply an evaluation result on top of the existing conditions.

    Conditions of components whose checker failed are left as they were. The
    Available summary is only recomputed for a complete pass. When the result
    records which condition types were evaluated, stored component conditions
    of any other type (components no longer declared) are dropped.
    """
    merged = list(existing)
    if result.condition_types is not None:
        merged = [
            entry
            for entry in merged
            if condition_type(entry) not in COMPONENT_CONDITION_TYPES
            or condition_type(entry) in result.condition_types
        ]
    for condition in result.conditions:
        upsert_condition(merged, condition)

    if result.complete and result.conditions:
        upsert_condition(merged, available_condition(result.conditions))
    return merged
