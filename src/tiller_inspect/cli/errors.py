"""Turn library and cluster errors into CLI exit codes."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import typer
from kubernetes.client import ApiException
from urllib3.exceptions import HTTPError

from tiller_inspect.exceptions import TillerException

logger = logging.getLogger(__name__)


@contextmanager
def exit_on_error() -> Iterator[None]:
    try:
        yield
    except ApiException as e:
        logger.debug("Kubernetes API error", exc_info=True)
        typer.echo(f"Error: Kubernetes API returned {e.status}: {e.reason}", err=True)
        raise typer.Exit(code=1) from e
    except (TillerException, HTTPError) as e:
        logger.debug("Command failed", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
