"""tiller-inspect storage - Show which backend Tiller stores releases in."""

from __future__ import annotations

from typing import Optional

import typer

from tiller_inspect.cli.errors import exit_on_error
from tiller_inspect.cli.options import ContextOption, TillerNamespaceOption
from tiller_inspect.config.settings import settings
from tiller_inspect.core.k8s_client import K8sClient
from tiller_inspect.core.storage_detector import detect_storage

app = typer.Typer()


@app.callback(invoke_without_command=True)
def storage(
    tiller_namespace: Optional[str] = TillerNamespaceOption,
    context: Optional[str] = ContextOption,
) -> None:
    """Print the storage backend (configmaps or secrets) of the Tiller deployment."""
    with exit_on_error():
        kind = detect_storage(K8sClient(context=context), tiller_namespace or settings.tiller_namespace)
    typer.echo(kind.value)
