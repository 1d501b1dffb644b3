"""High-level release list / get / aggregate operations."""

from __future__ import annotations

import logging

from tiller_inspect.core.k8s_client import K8sClient
from tiller_inspect.core.release_decoder import decode_item, quick_metadata_from_labels
from tiller_inspect.core.storage_detector import detect_storage
from tiller_inspect.models import StorageKind
from tiller_inspect.models.release import ListFilter, ListOptions, ReleaseRecord

logger = logging.getLogger(__name__)


class ReleaseStore:
    """Reads Tiller releases from the cluster.

    Nothing is cached: every call detects the storage backend again.
    """

    def __init__(self, k8s: K8sClient):
        self.k8s = k8s

    def _fetch(self, options: ListOptions) -> tuple[StorageKind, list]:
        query = ListFilter.from_options(options)
        kind = detect_storage(self.k8s, query.tiller_namespace)
        objects = self.k8s.list_release_items(query.tiller_namespace, kind, query.label_selector)
        logger.debug(
            "Found %d %s in %s matching %s",
            len(objects), kind.value, query.tiller_namespace, query.label_selector,
        )
        return kind, objects

    def list_releases(self, options: ListOptions | None = None) -> list[ReleaseRecord]:
        """List every decodable release revision, in API order."""
        kind, objects = self._fetch(options or ListOptions())
        releases: list[ReleaseRecord] = []
        for obj in objects:
            release = decode_item(obj, kind)
            if release is not None:
                releases.append(release)
        return releases

    def names_in_namespace(self, namespace: str) -> list[str]:
        """Unique names of the releases deployed into a target namespace."""
        names: dict[str, None] = {}
        for release in self.list_releases(ListOptions()):
            if release.namespace != namespace:
                continue
            names[release.name] = None
        return list(names)

    def release_names_in_namespace(self, namespace: str) -> str:
        """Comma-joined form of names_in_namespace, empty when nothing matches."""
        return ",".join(self.names_in_namespace(namespace))

    def get_release(
        self, name: str, options: ListOptions | None = None,
    ) -> ReleaseRecord | None:
        """Get the latest revision of a single release by name."""
        options = options or ListOptions()
        kind, objects = self._fetch(
            ListOptions(
                release_name=name,
                tiller_namespace=options.tiller_namespace,
                tiller_label=options.tiller_label,
            )
        )
        if not objects:
            return None

        # Highest revision first, falling back to older ones that still decode
        objects = sorted(objects, key=lambda obj: quick_metadata_from_labels(obj)["version"], reverse=True)
        for obj in objects:
            release = decode_item(obj, kind)
            if release is not None:
                return release
        return None

    def get_history(
        self, name: str, options: ListOptions | None = None,
    ) -> list[ReleaseRecord]:
        """Get all revisions of a release, sorted by revision ascending."""
        options = options or ListOptions()
        revisions = self.list_releases(
            ListOptions(
                release_name=name,
                tiller_namespace=options.tiller_namespace,
                tiller_label=options.tiller_label,
            )
        )
        revisions.sort(key=lambda r: r.revision)
        return revisions
