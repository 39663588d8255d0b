"""Exceptions raised by the wrapit launcher."""
from __future__ import annotations


class WrapItError(RuntimeError):
    """Base class for fatal wrapit errors.

    User-correctable install problems are reported as status codes instead;
    these exceptions cover conditions the launcher cannot recover from.
    """


class PlatformUnsupportedError(WrapItError):
    """Raised when the host operating system is not supported."""

    def __init__(self, message: str, *, platform: str | None = None) -> None:
        super().__init__(message)
        self.platform = platform


class SdkRootError(WrapItError):
    """Raised when SDKROOT cannot be discovered or points to a missing directory."""


class ArtifactManifestError(WrapItError):
    """Raised when the artifact manifest is missing, unreadable or invalid."""


__all__ = [
    "ArtifactManifestError",
    "PlatformUnsupportedError",
    "SdkRootError",
    "WrapItError",
]
