"""Shared fixtures for tiller-inspect tests."""

from __future__ import annotations

import base64
from collections.abc import Callable
from typing import Any

import pytest
from kubernetes.client import V1ConfigMap, V1Container, V1ObjectMeta, V1Pod, V1PodSpec, V1Secret

from tiller_inspect.core.hapi_schema import STATUS_CODES, Chart, Info, Metadata, Release, Status, Timestamp
from tiller_inspect.models import StorageKind
from tiller_inspect.utils.encoding import encode_release

DEPLOYED_AT = 1_600_000_000


def make_release(
    name: str = "web",
    version: int = 1,
    namespace: str = "apps",
    status: str = "DEPLOYED",
    chart_name: str = "nginx",
    seconds: int = DEPLOYED_AT,
    manifest: str = "",
) -> Any:
    """Build a hapi.release.Release message."""
    return Release(
        name=name,
        version=version,
        namespace=namespace,
        manifest=manifest,
        info=Info(
            status=Status(code=STATUS_CODES[status]),
            last_deployed=Timestamp(seconds=seconds, nanos=500),
        ),
        chart=Chart(metadata=Metadata(name=chart_name, version="1.2.3")),
    )


def tiller_pod(command: list[str] | None) -> V1Pod:
    return V1Pod(
        metadata=V1ObjectMeta(name="tiller-deploy-abc", labels={"name": "tiller"}),
        spec=V1PodSpec(containers=[V1Container(name="tiller", command=command)]),
    )


def _labels(name: str, version: int) -> dict[str, str]:
    return {"OWNER": "TILLER", "NAME": name, "VERSION": str(version), "STATUS": "DEPLOYED"}


def configmap_item(blob: str | None, name: str = "web", version: int = 1) -> V1ConfigMap:
    return V1ConfigMap(
        metadata=V1ObjectMeta(name=f"{name}.v{version}", namespace="kube-system", labels=_labels(name, version)),
        data={"release": blob} if blob is not None else None,
    )


def secret_item(blob: str | None, name: str = "web", version: int = 1) -> V1Secret:
    # The API transports Secret data base64-encoded
    data = None
    if blob is not None:
        data = {"release": base64.b64encode(blob.encode("ascii")).decode("ascii")}
    return V1Secret(
        metadata=V1ObjectMeta(name=f"{name}.v{version}", namespace="kube-system", labels=_labels(name, version)),
        data=data,
    )


class FakeK8sClient:
    """In-memory stand-in exposing the two list calls the store uses."""

    def __init__(self, pods: list[V1Pod], items: list[Any], kind: StorageKind = StorageKind.CONFIGMAPS):
        self.pods = pods
        self.items = items
        self.kind = kind
        self.pod_queries: list[tuple[str, str]] = []
        self.item_queries: list[tuple[str, StorageKind, str]] = []

    def list_pods(self, namespace: str, label_selector: str) -> list[V1Pod]:
        self.pod_queries.append((namespace, label_selector))
        return self.pods

    def list_release_items(self, namespace: str, kind: StorageKind, label_selector: str) -> list[Any]:
        self.item_queries.append((namespace, kind, label_selector))
        if kind is not self.kind:
            return []
        return self.items


@pytest.fixture(name="blob")
def blob_fixture() -> Callable[..., str]:
    """Factory producing an encoded release blob."""

    def _blob(compress: bool = True, **kwargs: Any) -> str:
        return encode_release(make_release(**kwargs), compress=compress)

    return _blob


@pytest.fixture(name="configmap_client")
def configmap_client_fixture(blob: Callable[..., str]) -> FakeK8sClient:
    """Tiller using ConfigMap storage with a mix of releases and revisions."""
    items = [
        configmap_item(blob(name="web", version=1, namespace="apps", status="SUPERSEDED"), "web", 1),
        configmap_item(blob(name="web", version=2, namespace="apps"), "web", 2),
        configmap_item(blob(name="db", version=1, namespace="data", chart_name="postgresql"), "db", 1),
    ]
    pods = [tiller_pod(["/tiller", "--listen=localhost:44134"])]
    return FakeK8sClient(pods, items, StorageKind.CONFIGMAPS)
