"""Tests for decoding Tiller release blobs."""

import base64
import logging
from datetime import datetime, timezone

import pytest

from tiller_inspect.core.hapi_schema import Release, status_code_name
from tiller_inspect.core.release_decoder import (
    decode_item,
    decode_release,
    extract_blob,
    quick_metadata_from_labels,
)
from tiller_inspect.exceptions import Base64Error, GzipError, MissingChartMetadataError, ProtoError
from tiller_inspect.models import StorageKind
from tiller_inspect.utils.encoding import encode_release

from tests.conftest import DEPLOYED_AT, configmap_item, make_release, secret_item

MANIFEST = """---
apiVersion: v1
kind: Service
metadata:
  name: web
"""


@pytest.mark.parametrize("compress", [True, False])
def test_decode_round_trip(compress: bool) -> None:
    message = make_release(
        name="web", version=7, namespace="apps", status="FAILED", chart_name="nginx", manifest=MANIFEST,
    )
    record = decode_release(encode_release(message, compress=compress))

    assert record.name == "web"
    assert record.revision == 7
    assert record.status == "FAILED"
    assert record.chart_name == "nginx"
    assert record.namespace == "apps"
    assert record.manifest == MANIFEST
    assert record.updated_at == datetime.fromtimestamp(DEPLOYED_AT, tz=timezone.utc)
    assert int(record.updated_at.timestamp()) == DEPLOYED_AT


def test_updated_uses_helm_v2_layout() -> None:
    message = make_release(seconds=1136214245)
    record = decode_release(encode_release(message))
    assert record.updated == "Mon Jan  2 15:04:05 2006"


def test_not_a_release_message() -> None:
    blob = base64.b64encode(b"not a release message").decode()
    with pytest.raises(ProtoError):
        decode_release(blob)


def test_invalid_base64() -> None:
    with pytest.raises(Base64Error):
        decode_release("%%%")


def test_corrupt_gzip() -> None:
    good = base64.b64decode(encode_release(make_release()))
    with pytest.raises(GzipError):
        decode_release(base64.b64encode(good[:20]).decode())


def test_missing_chart_metadata() -> None:
    blob = encode_release(Release(name="orphan", version=1, namespace="apps"))
    with pytest.raises(MissingChartMetadataError, match="orphan"):
        decode_release(blob)


def test_unknown_status_code() -> None:
    assert status_code_name(3) == "SUPERSEDED"
    assert status_code_name(42) == "42"


def test_extract_blob_configmap() -> None:
    item = configmap_item("abc=")
    assert extract_blob(item, StorageKind.CONFIGMAPS) == "abc="


def test_extract_blob_secret_strips_api_encoding() -> None:
    item = secret_item("abc=")
    assert item.data["release"] != "abc="
    assert extract_blob(item, StorageKind.SECRETS) == "abc="


def test_extract_blob_without_data() -> None:
    assert extract_blob(configmap_item(None), StorageKind.CONFIGMAPS) is None


def test_decode_item_from_secret(blob) -> None:
    record = decode_item(secret_item(blob(name="api")), StorageKind.SECRETS)
    assert record is not None
    assert record.name == "api"


def test_decode_item_skips_corrupt(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        assert decode_item(configmap_item("not base64!!", "broken"), StorageKind.CONFIGMAPS) is None
    assert "broken.v1" in caplog.text


def test_decode_item_skips_empty() -> None:
    assert decode_item(secret_item(None), StorageKind.SECRETS) is None


def test_quick_metadata_from_labels() -> None:
    meta = quick_metadata_from_labels(configmap_item("x", "web", 3))
    assert meta == {"name": "web", "status": "DEPLOYED", "version": 3}


@pytest.mark.parametrize("seconds", [2**62, -(2**62)])
def test_deploy_time_out_of_range(seconds: int) -> None:
    blob = encode_release(make_release(name="late", seconds=seconds))
    with pytest.raises(ProtoError, match="late"):
        decode_release(blob)
