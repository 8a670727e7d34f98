from __future__ import annotations

import pytest

from lip_core.errors import PathParseError
from lip_core.path import ToothPath, longest_common_path


def test_parse_normalizes_separators_and_dot_segments() -> None:
    assert ToothPath.parse("a//b/./c") == ToothPath(("a", "b", "c"))
    assert ToothPath.parse("a\\b\\c") == ToothPath.parse("a/b/c")
    assert ToothPath.parse("dir/").as_posix() == "dir"
    assert ToothPath.parse("").is_empty()


def test_parse_rejects_parent_segments() -> None:
    with pytest.raises(PathParseError, match="parent segment"):
        ToothPath.parse("assets/../../etc/passwd")


def test_prefix_matching_is_segment_wise() -> None:
    path = ToothPath.parse("assets/a.png")
    assert path.has_prefix(ToothPath.parse("assets"))
    assert path.has_prefix(ToothPath.empty())
    assert not ToothPath.parse("assetsX/a.png").has_prefix(ToothPath.parse("assets"))


def test_trim_prefix_leaves_unrelated_paths_unchanged() -> None:
    root = ToothPath.parse("pkgs/A")
    assert ToothPath.parse("pkgs/A/file.txt").trim_prefix(root).as_posix() == "file.txt"
    assert ToothPath.parse("other/c.png").trim_prefix(root).as_posix() == "other/c.png"


def test_join_and_parent() -> None:
    joined = ToothPath.parse("out").join(ToothPath.parse("sub/b.png"))
    assert str(joined) == "out/sub/b.png"
    assert joined.parent().as_posix() == "out/sub"
    assert joined.name == "b.png"
    with pytest.raises(PathParseError):
        ToothPath.empty().parent()


def test_longest_common_path() -> None:
    paths = [ToothPath.parse("pkgs/A/tooth.json"), ToothPath.parse("pkgs/A/file.txt")]
    assert longest_common_path(paths).as_posix() == "pkgs/A"
    assert longest_common_path([ToothPath.parse("a/b"), ToothPath.parse("c/d")]).is_empty()
    assert longest_common_path([ToothPath.parse("x/tooth.json")]).as_posix() == "x/tooth.json"
    assert longest_common_path([]).is_empty()
