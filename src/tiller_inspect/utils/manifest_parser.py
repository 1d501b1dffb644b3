"""Parse the multi-document YAML manifest stored with a release."""

from __future__ import annotations

import logging

import yaml

logger = logging.getLogger(__name__)


def resource_counts(manifest: str) -> dict[str, int]:
    """Count rendered resources by kind in a manifest string.

    Documents after a YAML syntax error are not counted.
    """
    counts: dict[str, int] = {}
    if not manifest:
        return counts
    try:
        for doc in yaml.safe_load_all(manifest):
            if not doc or not isinstance(doc, dict):
                continue
            kind = doc.get("kind", "")
            counts[kind] = counts.get(kind, 0) + 1
    except yaml.YAMLError as e:
        logger.warning("Manifest is not valid YAML, counting %d resources parsed so far: %s", sum(counts.values()), e)
    return counts
