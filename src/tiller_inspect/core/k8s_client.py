"""Kubernetes API wrapper."""

from __future__ import annotations

import logging
from typing import Any

from kubernetes import client, config

from tiller_inspect.config.settings import settings
from tiller_inspect.exceptions import ClusterConfigError
from tiller_inspect.models import StorageKind

logger = logging.getLogger(__name__)


class K8sClient:
    """Thin wrapper around the Kubernetes Python client.

    Instances are owned by the caller and passed into each operation.
    """

    def __init__(self, context: str | None = None, kubeconfig: str | None = None):
        self.context = context
        self.kubeconfig = kubeconfig or str(settings.kubeconfig)
        self._core_v1: client.CoreV1Api | None = None
        self._api_client: client.ApiClient | None = None

    def _load_config(self) -> client.ApiClient:
        if self._api_client is not None:
            return self._api_client
        try:
            cfg = client.Configuration()
            config.load_kube_config(
                config_file=self.kubeconfig,
                context=self.context,
                client_configuration=cfg,
            )
            # Prevent indefinite hangs on unreachable clusters
            cfg.retries = 1
            self._api_client = client.ApiClient(configuration=cfg)
        except config.ConfigException as kube_err:
            logger.debug("No usable kubeconfig at %s: %s", self.kubeconfig, kube_err)
            try:
                config.load_incluster_config()
            except config.ConfigException as e:
                raise ClusterConfigError(
                    f"Could not load kubeconfig {self.kubeconfig} or in-cluster config: {e}"
                ) from e
            self._api_client = client.ApiClient()
        return self._api_client

    @property
    def core_v1(self) -> client.CoreV1Api:
        if self._core_v1 is None:
            self._core_v1 = client.CoreV1Api(api_client=self._load_config())
        return self._core_v1

    @property
    def active_context_name(self) -> str:
        if self.context:
            return self.context
        try:
            _, ctx = config.list_kube_config_contexts(config_file=self.kubeconfig)
            return ctx.get("name", "unknown") if ctx else "unknown"
        except (config.ConfigException, OSError):
            return "in-cluster"

    def list_pods(self, namespace: str, label_selector: str) -> list[Any]:
        """List pods in a namespace matching a label selector."""
        result = self.core_v1.list_namespaced_pod(
            namespace=namespace,
            label_selector=label_selector,
            _request_timeout=settings.request_timeout,
        )
        return result.items

    def list_release_items(
        self, namespace: str, kind: StorageKind, label_selector: str,
    ) -> list[Any]:
        """List Tiller storage objects (ConfigMaps or Secrets) matching a label selector."""
        if kind is StorageKind.SECRETS:
            result = self.core_v1.list_namespaced_secret(
                namespace=namespace,
                label_selector=label_selector,
                _request_timeout=settings.request_timeout,
            )
        else:
            result = self.core_v1.list_namespaced_config_map(
                namespace=namespace,
                label_selector=label_selector,
                _request_timeout=settings.request_timeout,
            )
        return result.items
