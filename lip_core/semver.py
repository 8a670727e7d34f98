"""Semantic version parsing and ordering (SemVer 2.0)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import total_ordering

_SEMVER_RE = re.compile(
    r"^(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)"
    r"(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)


def _is_numeric(identifier: str) -> bool:
    return identifier.isdigit()


def _prerelease_key(identifier: str) -> tuple[int, int, str]:
    # Numeric identifiers sort before alphanumeric ones.
    if _is_numeric(identifier):
        return (0, int(identifier), "")
    return (1, 0, identifier)


@total_ordering
@dataclass(frozen=True)
class Version:
    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def parse(cls, raw: str) -> "Version":
        m = _SEMVER_RE.fullmatch(raw or "")
        if not m:
            raise ValueError(f"invalid semver: {raw!r}")
        prerelease = tuple(m.group(4).split(".")) if m.group(4) else ()
        for identifier in prerelease:
            if _is_numeric(identifier) and len(identifier) > 1 and identifier.startswith("0"):
                raise ValueError(f"invalid semver: {raw!r} (leading zero in pre-release)")
        build = tuple(m.group(5).split(".")) if m.group(5) else ()
        return cls(int(m.group(1)), int(m.group(2)), int(m.group(3)), prerelease, build)

    @property
    def is_stable(self) -> bool:
        return not self.prerelease

    def _precedence(self) -> tuple:
        # A release outranks any pre-release of the same core version.
        pre = (1, ()) if not self.prerelease else (0, tuple(_prerelease_key(p) for p in self.prerelease))
        return (self.major, self.minor, self.patch, pre)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence() < other._precedence()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text
