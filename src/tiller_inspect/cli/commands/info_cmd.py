"""tiller-inspect info <release> - Show the latest revision of a release."""

from __future__ import annotations

from typing import Optional

import typer

from tiller_inspect.cli.errors import exit_on_error
from tiller_inspect.cli.options import ContextOption, LabelOption, OutputOption, TillerNamespaceOption
from tiller_inspect.core.k8s_client import K8sClient
from tiller_inspect.core.release_store import ReleaseStore
from tiller_inspect.models.release import ListOptions
from tiller_inspect.output.formatters import output_release_info
from tiller_inspect.utils.manifest_parser import resource_counts

app = typer.Typer()


@app.callback(invoke_without_command=True)
def info(
    release: str = typer.Argument(help="Release name"),
    output: str = OutputOption,
    tiller_namespace: Optional[str] = TillerNamespaceOption,
    label: Optional[str] = LabelOption,
    context: Optional[str] = ContextOption,
    show_manifest: bool = typer.Option(False, "--show-manifest", help="Display the rendered manifest"),
) -> None:
    """Show details of the latest revision of a release."""
    options = ListOptions(tiller_namespace=tiller_namespace, tiller_label=label)
    with exit_on_error():
        store = ReleaseStore(K8sClient(context=context))
        rel = store.get_release(release, options)
    if rel is None:
        typer.echo(f"Release '{release}' not found.", err=True)
        raise typer.Exit(code=1)

    counts = resource_counts(rel.manifest)
    output_release_info(rel, output, show_manifest=show_manifest, resource_counts=counts)
