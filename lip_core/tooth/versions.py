"""Available-version listing for tooth repositories."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from lip_core.config import LipConfig
from lip_core.errors import NoStableVersion
from lip_core.network import ProxyClient, check_module_path, version_list_url
from lip_core.semver import Version

logger = logging.getLogger(__name__)

Fetch = Callable[[str], bytes]

_INCOMPATIBLE_SUFFIX = "+incompatible"


def parse_version_list(content: bytes) -> list[Version]:
    """Parse one version per line, skipping lines that are not versions.

    Each line may carry a leading ``v`` and a trailing ``+incompatible``.
    """
    versions: list[Version] = []
    for line in content.decode("utf-8", errors="replace").splitlines():
        text = line.strip()
        if text.startswith("v"):
            text = text[1:]
        if text.endswith(_INCOMPATIBLE_SUFFIX):
            text = text[: -len(_INCOMPATIBLE_SUFFIX)]
        try:
            versions.append(Version.parse(text))
        except ValueError:
            logger.debug("skipping version line=%r", line)
    return versions


def fetch_versions(repo_path: str, proxy_base_url: str, fetch: Fetch | None = None) -> list[Version]:
    """Fetch the versions of ``repo_path`` from a module proxy, newest first."""
    check_module_path(repo_path)
    url = version_list_url(repo_path, proxy_base_url)
    if fetch is None:
        fetch = ProxyClient().get_content
    content = fetch(url)

    versions = parse_version_list(content)
    versions.sort()
    versions.reverse()
    logger.debug("versions repo=%s url=%s count=%s", repo_path, url, len(versions))
    return versions


def latest_stable(versions: Iterable[Version]) -> Version:
    """Return the first version without a pre-release tag from a descending list."""
    for version in versions:
        if version.is_stable:
            return version
    raise NoStableVersion("cannot find latest stable version")


def latest_stable_version(repo_path: str, config: LipConfig, fetch: Fetch | None = None) -> Version:
    if fetch is None:
        fetch = ProxyClient(config.timeout_seconds).get_content
    versions = fetch_versions(repo_path, config.goproxy_url, fetch)
    try:
        return latest_stable(versions)
    except NoStableVersion as exc:
        raise NoStableVersion(
            f"cannot find latest stable version of {repo_path}", subject=repo_path
        ) from exc
