from __future__ import annotations

from pathlib import Path

import pytest

from lip_core.config import LipConfig
from lip_core.errors import FetchError, InvalidRepoPath, NoStableVersion
from lip_core.semver import Version
from lip_core.tooth.versions import fetch_versions, latest_stable, latest_stable_version, parse_version_list

PROXY = "https://proxy.example.com"


def _fetcher(body: bytes, calls: list[str]):
    def _fetch(url: str) -> bytes:
        calls.append(url)
        return body

    return _fetch


def test_parse_version_list_skips_noise() -> None:
    versions = parse_version_list(b"v1.2.3\n2.0.0+incompatible\nnot-a-version\nv1.3.0-rc1\n\n")
    assert [str(item) for item in versions] == ["1.2.3", "2.0.0", "1.3.0-rc1"]


def test_fetch_versions_sorts_descending() -> None:
    calls: list[str] = []
    body = b"v1.2.3\n2.0.0+incompatible\nnot-a-version\nv1.3.0-rc1\n"

    versions = fetch_versions("github.com/tooth-hub/demo", PROXY, _fetcher(body, calls))

    assert [str(item) for item in versions] == ["2.0.0", "1.3.0-rc1", "1.2.3"]
    assert latest_stable(versions) == Version(2, 0, 0)
    assert calls == ["https://proxy.example.com/github.com/tooth-hub/demo/@v/list"]


def test_fetch_versions_escapes_uppercase_path() -> None:
    calls: list[str] = []
    fetch_versions("github.com/Tooth/Demo", PROXY + "/", _fetcher(b"", calls))
    assert calls == ["https://proxy.example.com/github.com/!tooth/!demo/@v/list"]


def test_fetch_versions_rejects_invalid_repo_path() -> None:
    calls: list[str] = []
    with pytest.raises(InvalidRepoPath):
        fetch_versions("not a module", PROXY, _fetcher(b"", calls))
    assert calls == []


def test_fetch_error_propagates_unchanged() -> None:
    error = FetchError("fetch failed: 404", subject="url")

    def _fetch(url: str) -> bytes:
        raise error

    with pytest.raises(FetchError) as excinfo:
        fetch_versions("github.com/tooth-hub/demo", PROXY, _fetch)
    assert excinfo.value is error


@pytest.mark.parametrize("versions", [[], [Version.parse("2.0.0-rc1"), Version.parse("1.0.0-beta")]])
def test_latest_stable_requires_release(versions: list[Version]) -> None:
    with pytest.raises(NoStableVersion):
        latest_stable(versions)


def test_latest_stable_version_uses_config_proxy(tmp_path: Path) -> None:
    calls: list[str] = []
    config = LipConfig(metadata_dir=tmp_path, goproxy_url="https://goproxy.local")

    version = latest_stable_version(
        "github.com/tooth-hub/demo", config, _fetcher(b"v0.9.0\nv1.0.0-rc.1\n", calls)
    )

    assert version == Version(0, 9, 0)
    assert calls[0].startswith("https://goproxy.local/")


def test_latest_stable_version_names_repo_when_missing(tmp_path: Path) -> None:
    config = LipConfig(metadata_dir=tmp_path)
    with pytest.raises(NoStableVersion, match="github.com/tooth-hub/demo"):
        latest_stable_version("github.com/tooth-hub/demo", config, _fetcher(b"v1.0.0-rc.1\n", []))
