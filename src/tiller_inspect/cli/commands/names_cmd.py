"""tiller-inspect names <namespace> - Release names deployed into a namespace."""

from __future__ import annotations

from typing import Optional

import typer

from tiller_inspect.cli.errors import exit_on_error
from tiller_inspect.cli.options import ContextOption
from tiller_inspect.core.k8s_client import K8sClient
from tiller_inspect.core.release_store import ReleaseStore

app = typer.Typer()


@app.callback(invoke_without_command=True)
def names(
    namespace: str = typer.Argument(help="Target namespace of the releases"),
    context: Optional[str] = ContextOption,
) -> None:
    """Print the comma-separated names of releases deployed into NAMESPACE."""
    with exit_on_error():
        store = ReleaseStore(K8sClient(context=context))
        joined = store.release_names_in_namespace(namespace)
    typer.echo(joined)
