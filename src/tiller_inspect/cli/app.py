"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="tiller-inspect",
    help="Inspect Helm v2 releases stored by Tiller.",
    no_args_is_help=True,
)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _register_commands() -> None:
    from tiller_inspect.cli.commands.list_cmd import app as list_app
    from tiller_inspect.cli.commands.names_cmd import app as names_app
    from tiller_inspect.cli.commands.history_cmd import app as history_app
    from tiller_inspect.cli.commands.info_cmd import app as info_app
    from tiller_inspect.cli.commands.storage_cmd import app as storage_app

    app.add_typer(list_app, name="list", help="List Tiller releases")
    app.add_typer(names_app, name="names", help="Release names deployed into a namespace")
    app.add_typer(history_app, name="history", help="Show release revision history")
    app.add_typer(info_app, name="info", help="Show the latest revision of a release")
    app.add_typer(storage_app, name="storage", help="Show Tiller's storage backend")


_register_commands()


def main() -> None:
    app()
