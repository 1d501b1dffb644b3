"""tiller-inspect history <release> - Show release revision history."""

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
def history(
    release: str = typer.Argument(help="Release name"),
    output: str = OutputOption,
    tiller_namespace: Optional[str] = TillerNamespaceOption,
    label: Optional[str] = LabelOption,
    context: Optional[str] = ContextOption,
) -> None:
    """Show the revision history of a release."""
    options = ListOptions(tiller_namespace=tiller_namespace, tiller_label=label)
    with exit_on_error():
        store = ReleaseStore(K8sClient(context=context))
        revisions = store.get_history(release, options)
    if not revisions:
        typer.echo(f"No revisions found for release '{release}'.", err=True)
        raise typer.Exit(code=1)
    output_releases(revisions, output, title="Release History")
