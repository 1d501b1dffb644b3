"""Tiller release models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from tiller_inspect.config.settings import settings


@dataclass(frozen=True)
class ReleaseRecord:
    name: str
    revision: int
    updated_at: datetime
    status: str
    chart_name: str
    namespace: str
    manifest: str = ""

    @property
    def updated(self) -> str:
        """Last deployment time in the Helm v2 CLI layout, e.g. ``Mon Jan  2 15:04:05 2006``."""
        dt = self.updated_at
        return f"{dt:%a %b} {dt.day:>2} {dt:%H:%M:%S %Y}"


@dataclass
class ListOptions:
    release_name: str | None = None
    tiller_namespace: str | None = None
    tiller_label: str | None = None


@dataclass(frozen=True)
class ListFilter:
    """Resolved query for release objects in the Tiller namespace."""

    release_name: str | None
    tiller_namespace: str
    label_selector: str

    @classmethod
    def from_options(cls, options: ListOptions) -> ListFilter:
        namespace = options.tiller_namespace or settings.tiller_namespace
        selector = options.tiller_label or settings.tiller_label
        if options.release_name:
            selector += f",NAME={options.release_name}"
        return cls(
            release_name=options.release_name or None,
            tiller_namespace=namespace,
            label_selector=selector,
        )
