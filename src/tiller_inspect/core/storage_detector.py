"""Detect which storage backend Tiller writes release data to."""

from __future__ import annotations

import logging

from tiller_inspect.config.settings import settings
from tiller_inspect.core.k8s_client import K8sClient
from tiller_inspect.exceptions import NotFoundError
from tiller_inspect.models import StorageKind

logger = logging.getLogger(__name__)


def detect_storage(k8s: K8sClient, tiller_namespace: str) -> StorageKind:
    """Inspect the Tiller deployment's command line to find its storage backend.

    Tiller is started with ``--storage=secret`` when it keeps releases in
    Secrets; anything else means the ConfigMap default.
    """
    selector = settings.tiller_pod_selector
    pods = k8s.list_pods(tiller_namespace, selector)
    if not pods:
        raise NotFoundError(tiller_namespace, selector)

    storage = StorageKind.CONFIGMAPS
    for arg in _container_command(pods[0]):
        if settings.secret_storage_marker in arg:
            storage = StorageKind.SECRETS
    logger.debug("Tiller in %s uses %s storage", tiller_namespace, storage.value)
    return storage


def _container_command(pod) -> list[str]:
    spec = getattr(pod, "spec", None)
    if spec is None or not spec.containers:
        return []
    return list(spec.containers[0].command or [])
