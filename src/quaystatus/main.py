import kopf
import logging
import kubernetes

from quaystatus import config
from quaystatus.cmpstatus.evaluator import StatusEvaluator
from quaystatus.cmpstatus.registry import CheckerRegistry
from quaystatus.crd.registry import CRDRegistry
from quaystatus.models.quay import QuayRegistrySpec
from quaystatus.services.accessor import KubernetesAccessor

# Register kopf handlers
from quaystatus.handlers import status_handler  # noqa: F401

logging.basicConfig(
    level=getattr(logging, config.log_level(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def load_kube_config():
    """Load in-cluster configuration, falling back to the local kubeconfig."""
    try:
        kubernetes.config.load_incluster_config()
        logger.info("Loaded in-cluster Kubernetes config")
    except kubernetes.config.ConfigException:
        try:
            kubernetes.config.load_kube_config()
            logger.info("Loaded local Kubernetes config")
        except Exception as e:
            logger.warning(f"Could not load Kubernetes config: {e}")


def build_evaluator(timeout=None):
    """Wire the accessor, the checkers and the evaluator together."""
    timeout = timeout or config.check_timeout()
    accessor = KubernetesAccessor(request_timeout=timeout)
    registry = CheckerRegistry.with_builtin_checkers(accessor)
    return StatusEvaluator(registry, timeout=timeout)


@kopf.on.startup()
def startup_fn(settings: kopf.OperatorSettings, memo: kopf.Memo, **kwargs):
    """Configure the operator and build the component checkers."""
    logger.info("Quay status operator is starting up...")

    load_kube_config()

    group, version, plural = CRDRegistry.resource(QuayRegistrySpec)
    logger.info(f"Watching CRD: {group}/{version}/{plural}")

    memo.evaluator = build_evaluator()

    settings.batching.worker_limit = config.worker_limit()
    settings.posting.enabled = config.posting_enabled()
    settings.watching.server_timeout = config.server_timeout()

    logger.info(f"Check timeout: {memo.evaluator.timeout}s")
    logger.info(f"Check interval: {config.check_interval()}s")
    logger.info(f"Worker limit: {settings.batching.worker_limit}")
    logger.info(f"Posting enabled: {settings.posting.enabled}")
    logger.info("Quay status operator startup complete")


@kopf.on.cleanup()
def cleanup_fn(**kwargs):
    logger.info("Quay status operator shutdown complete")


def main():
    try:
        kopf.run(clusterwide=True)
    except KeyboardInterrupt:
        logger.info("Operator stopped by user")
    except Exception as e:
        logger.error(f"Operator failed: {e}")
        raise


if __name__ == "__main__":
    main()
