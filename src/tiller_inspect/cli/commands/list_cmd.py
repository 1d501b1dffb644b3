"""tiller-inspect list - List Tiller releases."""

from __future__ import annotations

from typing import Optional

import typer

from tiller_inspect.cli.errors import exit_on_error
from tiller_inspect.cli.options import ContextOption, LabelOption, OutputOption, TillerNamespaceOption
from tiller_inspect.core.k8s_client import K8sClient
from tiller_inspect.core.release_store import ReleaseStore
from tiller_inspect.models.release import ListOptions
from tiller_inspect.output.formatters import output_releases

app = typer.Typer()


@app.callback(invoke_without_command=True)
def list_releases(
    output: str = OutputOption,
    release: Optional[str] = typer.Option(None, "--release", "-r", help="Only show revisions of this release"),
    tiller_namespace: Optional[str] = TillerNamespaceOption,
    label: Optional[str] = LabelOption,
    context: Optional[str] = ContextOption,
) -> None:
    """List every release revision Tiller has stored."""
    options = ListOptions(release_name=release, tiller_namespace=tiller_namespace, tiller_label=label)
    with exit_on_error():
        store = ReleaseStore(K8sClient(context=context))
        releases = store.list_releases(options)
    output_releases(releases, output)
