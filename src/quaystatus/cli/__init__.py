import asyncio
import sys
from typing import Optional

import kubernetes
import typer
import yaml
from kubernetes.client.exceptions import ApiException
from pydantic import ValidationError
from typing_extensions import Annotated
from urllib3.exceptions import HTTPError

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv())

app = typer.Typer(
    help="Quay status: component readiness for QuayRegistry objects",
    add_completion=False,
)


@app.command("operator")
def run_operator():
    """Run the Kubernetes operator (connects to cluster)."""
    from quaystatus.main import main

    main()


def read_quay_registry(name, namespace):
    """Fetch a QuayRegistry object body from the cluster."""
    from quaystatus.crd.registry import CRDRegistry
    from quaystatus.models.quay import QuayRegistrySpec

    group, version, plural = CRDRegistry.resource(QuayRegistrySpec)
    api = kubernetes.client.CustomObjectsApi()
    return api.get_namespaced_custom_object(
        group=group,
        version=version,
        namespace=namespace,
        plural=plural,
        name=name,
    )


@app.command("status")
def status(
    name: Annotated[str, typer.Argument(help="QuayRegistry name")],
    namespace: Annotated[
        str, typer.Option("-n", "--namespace", help="Namespace of the registry")
    ] = "default",
    timeout: Annotated[
        Optional[float],
        typer.Option(
            "--timeout",
            help="Per-component deadline in seconds (default: CHECK_TIMEOUT)",
        ),
    ] = None,
):
    """Evaluate the components of a QuayRegistry once and print the conditions."""
    from quaystatus.handlers.status_handler import evaluate_body
    from quaystatus.main import build_evaluator, load_kube_config

    load_kube_config()

    try:
        body = read_quay_registry(name, namespace)
    except ApiException as e:
        typer.echo(f"Failed to read QuayRegistry {namespace}/{name}: {e.reason}")
        sys.exit(1)
    except HTTPError as e:
        typer.echo(f"Failed to reach the Kubernetes API: {e}")
        sys.exit(1)

    evaluator = build_evaluator(timeout=timeout)
    try:
        conditions, errors = asyncio.run(evaluate_body(evaluator, body))
    except ValidationError as e:
        typer.echo(f"QuayRegistry {namespace}/{name} has an invalid spec: {e}")
        sys.exit(1)

    typer.echo(yaml.safe_dump({"conditions": conditions}, sort_keys=False))

    if errors:
        for kind, error in errors.items():
            typer.echo(f"Check failed for {kind}: {error}", err=True)
        raise typer.Exit(1)
