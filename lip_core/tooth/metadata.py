"""Typed view over a tooth.json manifest."""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field, replace
from typing import Any, Iterable

from lip_core.errors import ManifestParseError

MANIFEST_FILENAME = "tooth.json"
WILDCARD = "*"


@dataclass(frozen=True)
class PlacementRule:
    src: str
    dest: str

    @property
    def is_wildcard(self) -> bool:
        return self.src.endswith(WILDCARD)

    def to_dict(self) -> dict[str, str]:
        return {"src": self.src, "dest": self.dest}


@dataclass(frozen=True)
class Metadata:
    """Parsed manifest.

    Only the fields lip-core acts on are typed; every other key of the source
    document is kept in ``raw`` and written back by ``to_dict``.
    """

    tooth_repo_path: str
    asset_url: str = ""
    files_place: tuple[PlacementRule, ...] = ()
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, payload: Any, *, source: str = MANIFEST_FILENAME) -> "Metadata":
        validate_manifest(payload, source=source)
        files = payload.get("files") or {}
        place = tuple(
            PlacementRule(src=item["src"], dest=item["dest"]) for item in files.get("place") or []
        )
        return cls(
            tooth_repo_path=payload["tooth"],
            asset_url=payload.get("asset_url") or "",
            files_place=place,
            raw=copy.deepcopy(payload),
        )

    @property
    def version(self) -> str | None:
        return self.raw.get("version")

    @property
    def info(self) -> dict[str, Any]:
        return dict(self.raw.get("info") or {})

    @property
    def files_preserve(self) -> tuple[str, ...]:
        return tuple((self.raw.get("files") or {}).get("preserve") or ())

    @property
    def files_remove(self) -> tuple[str, ...]:
        return tuple((self.raw.get("files") or {}).get("remove") or ())

    def with_files_place(self, rules: Iterable[PlacementRule]) -> "Metadata":
        return replace(self, files_place=tuple(rules))

    def to_dict(self) -> dict[str, Any]:
        payload = copy.deepcopy(self.raw)
        payload["tooth"] = self.tooth_repo_path
        if self.asset_url or "asset_url" in payload:
            payload["asset_url"] = self.asset_url
        files = payload.get("files") if isinstance(payload.get("files"), dict) else {}
        files["place"] = [rule.to_dict() for rule in self.files_place]
        payload["files"] = files
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)


def _fail(source: str, reason: str) -> ManifestParseError:
    return ManifestParseError(f"invalid manifest {source}: {reason}", subject=source)


def validate_manifest(payload: Any, *, source: str = MANIFEST_FILENAME) -> None:
    if not isinstance(payload, dict):
        raise _fail(source, "manifest must be an object")
    tooth = payload.get("tooth")
    if not isinstance(tooth, str) or not tooth.strip():
        raise _fail(source, "tooth is required")
    asset_url = payload.get("asset_url")
    if asset_url is not None and not isinstance(asset_url, str):
        raise _fail(source, "asset_url must be a string")
    version = payload.get("version")
    if version is not None and not isinstance(version, str):
        raise _fail(source, "version must be a string")
    info = payload.get("info")
    if info is not None and not isinstance(info, dict):
        raise _fail(source, "info must be an object")

    files = payload.get("files")
    if files is None:
        return
    if not isinstance(files, dict):
        raise _fail(source, "files must be an object")
    place = files.get("place")
    if place is not None:
        if not isinstance(place, list):
            raise _fail(source, "files.place must be a list")
        for item in place:
            if not isinstance(item, dict):
                raise _fail(source, "files.place entries must be objects")
            if not isinstance(item.get("src"), str) or not item["src"]:
                raise _fail(source, "files.place[].src is required")
            if not isinstance(item.get("dest"), str):
                raise _fail(source, "files.place[].dest is required")
    for key in ("preserve", "remove"):
        value = files.get(key)
        if value is None:
            continue
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise _fail(source, f"files.{key} must be a list of strings")


def parse_metadata(data: bytes, *, source: str = MANIFEST_FILENAME) -> Metadata:
    """Decode manifest bytes into ``Metadata``, raising ``ManifestParseError``."""
    try:
        payload = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ManifestParseError(f"invalid manifest {source}: {exc}", subject=source) from exc
    return Metadata.from_dict(payload, source=source)
