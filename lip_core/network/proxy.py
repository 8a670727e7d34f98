"""Go module proxy access used to list tooth versions."""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

import requests

from lip_core.config import DEFAULT_TIMEOUT_SECONDS
from lip_core.errors import FetchError

from .module import escape_module_path

log = logging.getLogger(__name__)


def version_list_url(repo_path: str, proxy_base_url: str) -> str:
    """Return ``<proxy>/<escaped repo path>/@v/list``."""
    base = (proxy_base_url or "").strip().rstrip("/")
    parsed = urlsplit(base)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise FetchError(f"invalid module proxy URL: {proxy_base_url!r}", subject=proxy_base_url)
    return f"{base}/{escape_module_path(repo_path)}/@v/list"


class ProxyClient:
    def __init__(self, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS):
        self.timeout_seconds = timeout_seconds

    def get_content(self, url: str) -> bytes:
        log.debug("proxy fetch url=%s timeout=%s", url, self.timeout_seconds)
        try:
            r = requests.get(url, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            raise FetchError(f"fetch failed: {url}: {exc}", subject=url) from exc
        if r.status_code >= 400:
            raise FetchError(f"fetch failed: {r.status_code} {url}", subject=url)
        return r.content
