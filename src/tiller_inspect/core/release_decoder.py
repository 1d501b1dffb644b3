"""Decode Tiller release blobs stored in ConfigMaps or Secrets."""

from __future__ import annotations

import base64
import logging
from datetime import datetime, timezone
from typing import Any

from google.protobuf.message import DecodeError as ProtobufDecodeError

from tiller_inspect.config.settings import settings
from tiller_inspect.core.hapi_schema import Release, status_code_name
from tiller_inspect.exceptions import DecodeError, MissingChartMetadataError, ProtoError
from tiller_inspect.models import StorageKind
from tiller_inspect.models.release import ReleaseRecord
from tiller_inspect.utils.encoding import decode_blob

logger = logging.getLogger(__name__)


def decode_release(blob: str) -> ReleaseRecord:
    """Decode a single release blob into a ReleaseRecord.

    Raises a DecodeError subclass when any stage of the pipeline fails.
    """
    payload = decode_blob(blob)
    try:
        message = Release.FromString(payload)
    except ProtobufDecodeError as e:
        raise ProtoError(f"Release data is not a valid release message: {e}") from e

    if not message.HasField("chart") or not message.chart.HasField("metadata"):
        raise MissingChartMetadataError(message.name)

    seconds = message.info.last_deployed.seconds
    try:
        deployed = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise ProtoError(f"Release {message.name} has an out of range deploy time {seconds}: {e}") from e
    return ReleaseRecord(
        name=message.name,
        revision=message.version,
        updated_at=deployed,
        status=status_code_name(message.info.status.code),
        chart_name=message.chart.metadata.name,
        namespace=message.namespace,
        manifest=message.manifest,
    )


def extract_blob(obj: Any, kind: StorageKind) -> str | None:
    """Return the release blob held by a ConfigMap or Secret, if any."""
    data = obj.data
    if not data or settings.release_data_key not in data:
        return None
    raw = data[settings.release_data_key]
    if kind is StorageKind.SECRETS:
        # Secret values arrive base64-encoded by the API on top of Tiller's own encoding
        if isinstance(raw, str):
            raw = raw.encode("ascii")
        return base64.b64decode(raw).decode("ascii")
    return raw


def decode_item(obj: Any, kind: StorageKind) -> ReleaseRecord | None:
    """Decode a storage object, returning None when it holds no usable release."""
    try:
        blob = extract_blob(obj, kind)
        if blob is None:
            logger.warning("Skipping %s %s: no release data", kind.value, _safe_name(obj))
            return None
        return decode_release(blob)
    except (DecodeError, ValueError) as e:
        logger.warning("Skipping %s %s: %s", kind.value, _safe_name(obj), e)
        logger.debug("Decode failure for %s", _safe_name(obj), exc_info=True)
        return None


def quick_metadata_from_labels(obj: Any) -> dict:
    """Extract quick metadata from labels without decoding the release payload.

    Returns a dict with keys: name, status, version (revision).
    """
    labels: dict[str, str] = {}
    if getattr(obj, "metadata", None) and obj.metadata.labels:
        labels = dict(obj.metadata.labels)
    try:
        version = int(labels.get("VERSION", "0"))
    except ValueError:
        version = 0
    return {
        "name": labels.get("NAME", ""),
        "status": labels.get("STATUS", ""),
        "version": version,
    }


def _safe_name(obj: Any) -> str:
    if getattr(obj, "metadata", None):
        return obj.metadata.name or "<unknown>"
    return "<unknown>"
