"""Module path syntax shared by tooth repositories and the Go module proxy."""

from __future__ import annotations

import re

from lip_core.errors import InvalidRepoPath

_ELEM_CHARS_RE = re.compile(r"[A-Za-z0-9._~-]+")
_FIRST_ELEM_CHARS_RE = re.compile(r"[a-z0-9.-]+")
_WINDOWS_RESERVED = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)


def _invalid(path: str, reason: str) -> InvalidRepoPath:
    return InvalidRepoPath(f"invalid repository path {path!r}: {reason}", subject=path)


def _check_element(path: str, elem: str) -> None:
    if not elem:
        raise _invalid(path, "empty path element")
    if elem.count(".") == len(elem):
        raise _invalid(path, f"invalid path element {elem!r}")
    if elem.startswith("."):
        raise _invalid(path, f"leading dot in path element {elem!r}")
    if elem.endswith("."):
        raise _invalid(path, f"trailing dot in path element {elem!r}")
    if not _ELEM_CHARS_RE.fullmatch(elem):
        raise _invalid(path, f"invalid char in path element {elem!r}")
    short = elem.split(".", 1)[0]
    if short.upper() in _WINDOWS_RESERVED:
        raise _invalid(path, f"{elem!r} disallowed as path element component on Windows")
    tilde = short.rfind("~")
    if 0 <= tilde < len(short) - 1 and short[tilde + 1 :].isdigit():
        raise _invalid(path, f"trailing tilde and digits in path element {elem!r}")


def _has_valid_major_suffix(path: str) -> bool:
    i = len(path)
    dot = False
    while i > 0 and (path[i - 1].isdigit() or path[i - 1] == "."):
        if path[i - 1] == ".":
            dot = True
        i -= 1
    if path.startswith("gopkg.in/"):
        # gopkg.in paths always end in .vN; v0 is allowed there.
        if i <= 1 or path[i - 1] != "v" or path[i - 2] != ".":
            return False
        major = path[i - 2 :]
        return len(major) > 2 and (major[2] != "0" or major == ".v0")
    if i <= 1 or i == len(path) or path[i - 1] != "v" or path[i - 2] != "/":
        return True
    major = path[i - 2 :]
    return not (dot or len(major) <= 2 or major[2] == "0" or major == "/v1")


def check_module_path(path: str) -> None:
    """Validate ``path`` as a module path such as ``github.com/org/name``.

    Raises ``InvalidRepoPath`` describing the first violation found.
    """
    if not path:
        raise _invalid(path, "empty string")
    if path.startswith("-"):
        raise _invalid(path, "leading dash")
    if "//" in path:
        raise _invalid(path, "double slash")
    if path.startswith("/"):
        raise _invalid(path, "leading slash")
    if path.endswith("/"):
        raise _invalid(path, "trailing slash")

    elements = path.split("/")
    for elem in elements:
        _check_element(path, elem)

    first = elements[0]
    if "." not in first:
        raise _invalid(path, "missing dot in first path element")
    if not _FIRST_ELEM_CHARS_RE.fullmatch(first):
        raise _invalid(path, f"invalid char in first path element {first!r}")

    if not _has_valid_major_suffix(path):
        raise _invalid(path, "disallowed major version suffix")


def escape_module_path(path: str) -> str:
    """Escape uppercase letters as ``!`` + lowercase, as module proxies expect."""
    check_module_path(path)
    return "".join(f"!{ch.lower()}" if "A" <= ch <= "Z" else ch for ch in path)
