"""Reading tooth archives: package root inference and manifest loading."""

from __future__ import annotations

import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from lip_core.errors import ArchiveOpenError, ConfigMismatch, ManifestNotFound, PathParseError
from lip_core.path import ToothPath, longest_common_path

from .metadata import MANIFEST_FILENAME, Metadata, parse_metadata
from .wildcards import populate_wildcards

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Archive:
    """A tooth archive with its manifest resolved against the archive contents.

    ``asset_archive_path`` is the zip holding the files to place. When the
    manifest declares an ``asset_url`` that zip is an external download and
    ``asset_archive_root`` is empty; otherwise it is this archive and the root
    is the directory holding tooth.json.
    """

    metadata: Metadata
    asset_archive_path: Path
    asset_archive_root: ToothPath = ToothPath()

    def __post_init__(self) -> None:
        if self.metadata.asset_url and not self.asset_archive_root.is_empty():
            raise ConfigMismatch(
                "archive with external asset must not carry an asset root",
                subject=str(self.asset_archive_path),
            )

    @property
    def uses_external_asset(self) -> bool:
        return bool(self.metadata.asset_url)


def infer_root(paths: Sequence[ToothPath]) -> ToothPath:
    """Return the package root shared by ``paths``.

    The root is the longest common path of all entries. A single entry is its
    own common path, so in that case the root is the entry's parent directory:
    ``["tooth.json"]`` has the empty root and ``["pkg/tooth.json"]`` has
    ``pkg``.
    """
    root = longest_common_path(paths)
    if len(paths) == 1:
        root = root.parent()
    return root


def _list_file_paths(archive: zipfile.ZipFile, archive_path: Path) -> list[tuple[ToothPath, zipfile.ZipInfo]]:
    entries: list[tuple[ToothPath, zipfile.ZipInfo]] = []
    for info in archive.infolist():
        if info.is_dir():
            continue
        try:
            entries.append((ToothPath.parse(info.filename), info))
        except PathParseError as exc:
            raise PathParseError(
                f"invalid entry {info.filename!r} in archive {archive_path}: {exc}",
                subject=info.filename,
            ) from exc
    return entries


def make_archive(archive_path: Path | str, asset_archive_path: Path | str | None = None) -> Archive:
    """Open ``archive_path`` and build an ``Archive`` from its tooth.json.

    ``asset_archive_path`` names the already-downloaded external asset zip and
    must be given exactly when the manifest declares ``asset_url``.
    """
    archive_path = Path(archive_path)
    try:
        archive = zipfile.ZipFile(archive_path)
    except (OSError, zipfile.BadZipFile) as exc:
        raise ArchiveOpenError(f"failed to open archive {archive_path}: {exc}", subject=str(archive_path)) from exc

    with archive:
        entries = _list_file_paths(archive, archive_path)
        if not entries:
            raise ManifestNotFound(f"archive {archive_path} contains no files", subject=str(archive_path))
        file_paths = [path for path, _ in entries]

        root = infer_root(file_paths)
        manifest_path = root.join(ToothPath.parse(MANIFEST_FILENAME))
        logger.debug("archive root path=%s root=%s entries=%s", archive_path, root, len(file_paths))

        manifest_info = next((info for path, info in entries if path == manifest_path), None)
        if manifest_info is None:
            raise ManifestNotFound(
                f"archive {archive_path} does not contain {manifest_path}",
                subject=str(archive_path),
            )
        try:
            with archive.open(manifest_info) as handle:
                manifest_bytes = handle.read()
        except (OSError, zipfile.BadZipFile, RuntimeError, NotImplementedError) as exc:
            # Encrypted entries raise RuntimeError, unknown compression NotImplementedError.
            raise ArchiveOpenError(
                f"failed to read {manifest_path} from {archive_path}: {exc}", subject=str(archive_path)
            ) from exc

    metadata = parse_metadata(manifest_bytes, source=f"{archive_path}:{manifest_path}")

    external = asset_archive_path is not None and str(asset_archive_path) not in ("", ".")
    if bool(metadata.asset_url) != external:
        raise ConfigMismatch(
            f"asset_url and asset archive path must be both specified or both empty: {archive_path}",
            subject=str(archive_path),
        )

    if not external:
        trimmed = [path.trim_prefix(root) for path in file_paths]
        return Archive(
            metadata=populate_wildcards(metadata, trimmed),
            asset_archive_path=archive_path,
            asset_archive_root=root,
        )

    # Wildcards resolve against this archive's untrimmed entries, not the asset's.
    return Archive(
        metadata=populate_wildcards(metadata, file_paths),
        asset_archive_path=Path(asset_archive_path),
        asset_archive_root=ToothPath(),
    )
