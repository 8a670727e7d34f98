"""Error types raised by lip-core."""

from __future__ import annotations


class ToothError(Exception):
    """Base error for tooth ingestion and version resolution."""

    def __init__(self, message: str, *, subject: str | None = None) -> None:
        super().__init__(message)
        self.subject = subject


class ArchiveOpenError(ToothError):
    """Raised when a tooth archive cannot be opened as a zip file."""


class ManifestNotFound(ToothError):
    """Raised when tooth.json is absent at the inferred package root."""


class ManifestParseError(ToothError):
    """Raised when a manifest is not valid JSON or lacks required fields."""


class ConfigMismatch(ToothError):
    """Raised when asset_url and the external asset archive disagree."""


class PathParseError(ToothError):
    """Raised when a string cannot be parsed as a tooth path."""


class InvalidRepoPath(ToothError):
    """Raised when a tooth repository path is not a valid module path."""


class FetchError(ToothError):
    """Raised by fetch collaborators when a remote resource is unavailable."""


class NoStableVersion(ToothError):
    """Raised when a version list holds no release without a pre-release tag."""


class NotFound(ToothError):
    """Raised when an installed tooth lookup misses."""
