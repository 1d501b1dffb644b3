"""Exceptions raised by tiller-inspect."""

__all__ = [
    "TillerException",
    "DecodeError",
    "Base64Error",
    "GzipError",
    "ProtoError",
    "MissingChartMetadataError",
    "NotFoundError",
    "ClusterConfigError",
]


class TillerException(Exception):
    """Generic base exception used for this library."""


class DecodeError(TillerException):
    """Raised when a release blob cannot be turned into a release record."""


class Base64Error(DecodeError):
    """Raised when the blob is not valid base64 text."""


class GzipError(DecodeError):
    """Raised when a gzip-prefixed payload is not a valid gzip stream."""


class ProtoError(DecodeError):
    """Raised when the payload does not parse as a release message."""


class MissingChartMetadataError(DecodeError):
    """Raised when a decoded release carries no chart metadata."""

    def __init__(self, release_name: str) -> None:
        super().__init__(f"Release {release_name or '<unnamed>'} has no chart metadata")
        self.release_name = release_name


class NotFoundError(TillerException):
    """Raised when no Tiller pods are running in the Tiller namespace."""

    def __init__(self, namespace: str, selector: str) -> None:
        super().__init__(f"Found 0 tiller pods in namespace {namespace} ({selector})")
        self.namespace = namespace
        self.selector = selector


class ClusterConfigError(TillerException):
    """Raised when neither a kubeconfig nor in-cluster config can be loaded."""
