"""Kopf handler publishing component conditions on QuayRegistry objects."""

import logging

import kopf
from pydantic import ValidationError

from quaystatus.cmpstatus.evaluator import merge
from quaystatus.config import check_interval
from quaystatus.crd.base import conditions_to_dicts
from quaystatus.crd.registry import CRDRegistry
from quaystatus.models.quay import QuayRegistry, QuayRegistrySpec

logger = logging.getLogger(__name__)


async def evaluate_body(evaluator, body):
    """Evaluate a raw QuayRegistry body.

    Returns:
        Tuple of the merged status conditions (as dicts) and the per-component
        infrastructure errors of this pass.
    """
    quay = QuayRegistry.from_body(body)
    result = await evaluator.evaluate(quay)
    merged = merge(quay.status.conditions, result)
    return conditions_to_dicts(merged), result.errors


@kopf.timer(*CRDRegistry.resource(QuayRegistrySpec), interval=check_interval())
async def check_components(body, name, namespace, patch, memo, **kwargs):
    """Periodically refresh the component conditions of a QuayRegistry."""
    try:
        conditions, errors = await evaluate_body(memo.evaluator, body)
    except ValidationError as e:
        logger.error(f"QuayRegistry {namespace}/{name} has an invalid spec: {e}")
        return

    patch.status["conditions"] = conditions

    if errors:
        failed = ", ".join(sorted(errors))
        logger.warning(f"QuayRegistry {namespace}/{name}: checks failed for {failed}")
        kopf.warn(
            body,
            reason="ComponentCheckFailed",
            message=f"Could not evaluate components: {failed}",
        )
    else:
        logger.debug(f"QuayRegistry {namespace}/{name}: all component checks done")
