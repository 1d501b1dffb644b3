"""Shared CLI options."""

from __future__ import annotations

import typer

from tiller_inspect.config.settings import settings

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")
TillerNamespaceOption = typer.Option(
    None, "--tiller-namespace", help="Namespace Tiller is installed in (default: $TILLER_NAMESPACE or kube-system)",
)
LabelOption = typer.Option(None, "--label", "-l", help="Label selector for Tiller storage objects")
ContextOption = typer.Option(None, "--context", help="Kubernetes context name")
