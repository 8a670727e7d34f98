"""Lookup of installed tooth metadata persisted as JSON files."""

from __future__ import annotations

import logging
from pathlib import Path

from lip_core.errors import ManifestParseError, NotFound

from .metadata import Metadata, parse_metadata

logger = logging.getLogger(__name__)


def list_all(metadata_dir: Path) -> list[Metadata]:
    """Parse every ``*.json`` file in ``metadata_dir``.

    The store is local and trusted: the first unreadable or malformed file
    aborts the listing. Results are sorted case-insensitively by repo path.
    """
    metadata_dir = Path(metadata_dir)
    if not metadata_dir.is_dir():
        return []

    metadata_list: list[Metadata] = []
    for path in sorted(metadata_dir.glob("*.json")):
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise ManifestParseError(f"failed to read metadata file {path}: {exc}", subject=str(path)) from exc
        metadata_list.append(parse_metadata(data, source=str(path)))

    metadata_list.sort(key=lambda item: item.tooth_repo_path.lower())
    logger.debug("installed metadata dir=%s count=%s", metadata_dir, len(metadata_list))
    return metadata_list


def get(metadata_dir: Path, repo_path: str) -> Metadata:
    for metadata in list_all(metadata_dir):
        if metadata.tooth_repo_path == repo_path:
            return metadata
    raise NotFound(f"cannot find installed tooth metadata: {repo_path}", subject=repo_path)


def exists(metadata_dir: Path, repo_path: str) -> bool:
    return any(metadata.tooth_repo_path == repo_path for metadata in list_all(metadata_dir))


class InstalledMetadataRegistry:
    """Installed metadata under one directory; rescanned on every call."""

    def __init__(self, metadata_dir: Path) -> None:
        self.metadata_dir = Path(metadata_dir)

    def list_all(self) -> list[Metadata]:
        return list_all(self.metadata_dir)

    def exists(self, repo_path: str) -> bool:
        return exists(self.metadata_dir, repo_path)

    def get(self, repo_path: str) -> Metadata:
        return get(self.metadata_dir, repo_path)
