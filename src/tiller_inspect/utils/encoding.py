"""Base64 / gzip encode-decode helpers for Tiller release blobs."""

from __future__ import annotations

import base64
import gzip
import zlib
from typing import Any

from tiller_inspect.exceptions import Base64Error, GzipError

# gzip magic number followed by the deflate method byte
GZIP_MAGIC = b"\x1f\x8b\x08"


def decode_blob(data: str) -> bytes:
    """Decode a Tiller release blob into serialized release bytes.

    Pipeline: base64 → gzip (only when the magic header is present).
    Releases stored before Tiller compressed its payloads are plain
    base64-encoded protobuf, so a missing header is not an error.
    """
    # Line-wrapped base64 is accepted
    data = data.replace("\r", "").replace("\n", "")
    try:
        decoded = base64.b64decode(data, validate=True)
    except ValueError as e:
        raise Base64Error(f"Release data is not valid base64: {e}") from e

    if decoded[:3] != GZIP_MAGIC:
        return decoded
    try:
        return gzip.decompress(decoded)
    except (OSError, EOFError, zlib.error) as e:
        raise GzipError(f"Release data is not a valid gzip stream: {e}") from e


def encode_release(release: Any, compress: bool = True) -> str:
    """Encode a release message back to a Tiller blob (for tests and fixtures)."""
    raw = release.SerializeToString()
    if compress:
        raw = gzip.compress(raw)
    return base64.b64encode(raw).decode("ascii")
