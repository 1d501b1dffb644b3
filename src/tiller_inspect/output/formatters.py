"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from tiller_inspect.models.release import ReleaseRecord

console = Console()


def _release_to_dict(r: ReleaseRecord, with_manifest: bool = False) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": r.name,
        "revision": r.revision,
        "updated": r.updated_at.isoformat(),
        "status": r.status,
        "chart": r.chart_name,
        "namespace": r.namespace,
    }
    if with_manifest:
        data["manifest"] = r.manifest
    return data


def output_releases(releases: list[ReleaseRecord], fmt: str, title: str = "Tiller Releases") -> None:
    if fmt == "json":
        data = [_release_to_dict(r) for r in releases]
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        data = [_release_to_dict(r) for r in releases]
        console.print(yaml.dump(data, default_flow_style=False))
    else:
        from tiller_inspect.output.tables import release_list_table
        console.print(release_list_table(releases, title=title))


def output_release_info(
    release: ReleaseRecord,
    fmt: str,
    show_manifest: bool = False,
    resource_counts: dict[str, int] | None = None,
) -> None:
    if fmt == "json":
        data = _release_to_dict(release, with_manifest=show_manifest)
        if resource_counts:
            data["resource_counts"] = resource_counts
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        data = _release_to_dict(release, with_manifest=show_manifest)
        if resource_counts:
            data["resource_counts"] = resource_counts
        console.print(yaml.dump(data, default_flow_style=False))
    else:
        from tiller_inspect.output.tables import manifest_panel, release_info_panel, resource_count_table
        console.print(release_info_panel(release))
        if resource_counts:
            console.print(resource_count_table(resource_counts))
        if show_manifest:
            console.print(manifest_panel(release.manifest))
