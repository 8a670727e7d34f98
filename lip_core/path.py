"""Normalized relative paths used inside tooth archives and placement rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from .errors import PathParseError

_SEPARATOR_RE = re.compile(r"[\\/]+")


@dataclass(frozen=True)
class ToothPath:
    """A '/'-separated relative path stored as a tuple of segments.

    Parsing accepts both '/' and '\\' as separators and drops empty and ``.``
    segments, so ``"a//b/./c"`` and ``"a\\b\\c"`` compare equal to ``"a/b/c"``.
    The empty path (no segments) is valid and is a prefix of every path.
    """

    parts: tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw: str) -> "ToothPath":
        if "\x00" in raw:
            raise PathParseError(f"invalid path {raw!r}: contains NUL", subject=raw)
        parts: list[str] = []
        for segment in _SEPARATOR_RE.split(raw):
            if not segment or segment == ".":
                continue
            if segment == "..":
                raise PathParseError(f"invalid path {raw!r}: parent segment not allowed", subject=raw)
            parts.append(segment)
        return cls(tuple(parts))

    @classmethod
    def empty(cls) -> "ToothPath":
        return cls()

    def is_empty(self) -> bool:
        return not self.parts

    def join(self, other: "ToothPath") -> "ToothPath":
        return ToothPath(self.parts + other.parts)

    def has_prefix(self, prefix: "ToothPath") -> bool:
        size = len(prefix.parts)
        return self.parts[:size] == prefix.parts

    def trim_prefix(self, prefix: "ToothPath") -> "ToothPath":
        """Drop ``prefix`` from the front; paths without it are returned as-is."""
        if not self.has_prefix(prefix):
            return self
        return ToothPath(self.parts[len(prefix.parts) :])

    def parent(self) -> "ToothPath":
        if not self.parts:
            raise PathParseError("empty path has no parent directory", subject="")
        return ToothPath(self.parts[:-1])

    @property
    def name(self) -> str:
        return self.parts[-1] if self.parts else ""

    def as_posix(self) -> str:
        return "/".join(self.parts)

    def __str__(self) -> str:
        return self.as_posix()


def longest_common_path(paths: Iterable[ToothPath]) -> ToothPath:
    """Return the longest segment-wise prefix shared by all ``paths``.

    With a single path the result is that path itself; with no paths it is the
    empty path.
    """
    common: tuple[str, ...] | None = None
    for path in paths:
        if common is None:
            common = path.parts
            continue
        size = 0
        for left, right in zip(common, path.parts):
            if left != right:
                break
            size += 1
        common = common[:size]
        if not common:
            break
    return ToothPath(common or ())
