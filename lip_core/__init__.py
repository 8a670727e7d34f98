"""Manifest ingestion and version resolution for lip teeth."""

from .config import LipConfig, load_config
from .errors import (
    ArchiveOpenError,
    ConfigMismatch,
    FetchError,
    InvalidRepoPath,
    ManifestNotFound,
    ManifestParseError,
    NoStableVersion,
    NotFound,
    PathParseError,
    ToothError,
)
from .path import ToothPath, longest_common_path
from .semver import Version
from .tooth import (
    Archive,
    InstalledMetadataRegistry,
    Metadata,
    PlacementRule,
    fetch_versions,
    latest_stable,
    latest_stable_version,
    make_archive,
    resolve_placement,
)

__all__ = [
    "Archive",
    "ArchiveOpenError",
    "ConfigMismatch",
    "FetchError",
    "InstalledMetadataRegistry",
    "InvalidRepoPath",
    "LipConfig",
    "ManifestNotFound",
    "ManifestParseError",
    "Metadata",
    "NoStableVersion",
    "NotFound",
    "PathParseError",
    "PlacementRule",
    "ToothError",
    "ToothPath",
    "Version",
    "fetch_versions",
    "latest_stable",
    "latest_stable_version",
    "load_config",
    "longest_common_path",
    "make_archive",
    "resolve_placement",
]
