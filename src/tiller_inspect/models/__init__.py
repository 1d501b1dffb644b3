"""Data models for tiller-inspect."""

from __future__ import annotations

import enum


class StorageKind(enum.Enum):
    """Where Tiller persists release blobs."""

    CONFIGMAPS = "configmaps"
    SECRETS = "secrets"
