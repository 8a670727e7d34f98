"""Tooth archives, manifests, installed metadata and version listing."""

from .archive import Archive, infer_root, make_archive
from .metadata import MANIFEST_FILENAME, WILDCARD, Metadata, PlacementRule, parse_metadata, validate_manifest
from .registry import InstalledMetadataRegistry, exists, get, list_all
from .versions import fetch_versions, latest_stable, latest_stable_version, parse_version_list
from .wildcards import populate_wildcards, resolve_placement

__all__ = [
    "Archive",
    "InstalledMetadataRegistry",
    "MANIFEST_FILENAME",
    "Metadata",
    "PlacementRule",
    "WILDCARD",
    "exists",
    "fetch_versions",
    "get",
    "infer_root",
    "latest_stable",
    "latest_stable_version",
    "list_all",
    "make_archive",
    "parse_metadata",
    "parse_version_list",
    "populate_wildcards",
    "resolve_placement",
    "validate_manifest",
]
