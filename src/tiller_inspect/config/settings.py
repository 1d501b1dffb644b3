"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _default_kubeconfig() -> Path:
    """Return the kubeconfig path, honouring KUBECONFIG like kubectl does."""
    env_path = os.environ.get("KUBECONFIG", "")
    if env_path:
        return Path(env_path)
    return Path(os.environ.get("HOME", str(Path.home()))) / ".kube" / "config"


def _default_tiller_namespace() -> str:
    # Helm v2 reads the same variable
    return os.environ.get("TILLER_NAMESPACE", "") or "kube-system"


@dataclass
class Settings:
    kubeconfig: Path = field(default_factory=_default_kubeconfig)
    tiller_namespace: str = field(default_factory=_default_tiller_namespace)
    tiller_label: str = "OWNER=TILLER"
    tiller_pod_selector: str = "name=tiller"
    secret_storage_marker: str = "secret"
    release_data_key: str = "release"
    request_timeout: int = 30
    default_output: str = "table"


# Global singleton
settings = Settings()
