"""Rich table builders for each command."""

from __future__ import annotations

from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from tiller_inspect.models.release import ReleaseRecord
from tiller_inspect.output.themes import styled_status


def release_list_table(releases: list[ReleaseRecord], title: str = "Tiller Releases") -> Table:
    table = Table(title=title, expand=True, show_lines=False)
    table.add_column("Name", style="bold white", no_wrap=True)
    table.add_column("Revision", justify="right", style="dim")
    table.add_column("Updated", style="dim", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Chart", style="magenta", no_wrap=True)
    table.add_column("Namespace", style="blue", no_wrap=True)

    for r in releases:
        table.add_row(
            r.name,
            str(r.revision),
            r.updated,
            styled_status(r.status),
            r.chart_name,
            r.namespace,
        )
    return table


def release_info_panel(release: ReleaseRecord) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Release", release.name)
    table.add_row("Namespace", release.namespace)
    table.add_row("Status", styled_status(release.status))
    table.add_row("Revision", str(release.revision))
    table.add_row("Chart", release.chart_name or "-")
    table.add_row("Last Deployed", release.updated)

    return Panel(table, title=f"[bold]Release: {release.name}[/bold]", border_style="blue")


def resource_count_table(counts: dict[str, int]) -> Table:
    table = Table(title="Resources by Kind", expand=False)
    table.add_column("Kind", style="cyan")
    table.add_column("Count", justify="right", style="bold")
    for kind, count in sorted(counts.items()):
        table.add_row(kind, str(count))
    return table


def manifest_panel(manifest: str) -> Panel:
    syntax = Syntax(manifest or "# (empty manifest)", "yaml", theme="monokai", line_numbers=False)
    return Panel(syntax, title="[bold]Manifest[/bold]", border_style="green")
