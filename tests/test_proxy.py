from __future__ import annotations

import pytest
import requests

from lip_core.errors import FetchError
from lip_core.network import proxy
from lip_core.network.proxy import ProxyClient, version_list_url


class _FakeResponse:
    def __init__(self, status_code: int, content: bytes = b"") -> None:
        self.status_code = status_code
        self.content = content


def test_version_list_url_trims_trailing_slash() -> None:
    assert (
        version_list_url("github.com/tooth-hub/demo", "https://goproxy.io/")
        == "https://goproxy.io/github.com/tooth-hub/demo/@v/list"
    )


def test_version_list_url_rejects_non_http_proxy() -> None:
    with pytest.raises(FetchError, match="invalid module proxy URL"):
        version_list_url("github.com/tooth-hub/demo", "file:///tmp/proxy")


def test_get_content_returns_body(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def _fake_get(url, **kwargs):
        seen["url"] = url
        seen["timeout"] = kwargs.get("timeout")
        return _FakeResponse(200, b"v1.0.0\n")

    monkeypatch.setattr(proxy.requests, "get", _fake_get)
    client = ProxyClient(timeout_seconds=3.0)

    assert client.get_content("https://goproxy.io/x.com/y/@v/list") == b"v1.0.0\n"
    assert seen == {"url": "https://goproxy.io/x.com/y/@v/list", "timeout": 3.0}


def test_get_content_raises_on_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(proxy.requests, "get", lambda url, **kwargs: _FakeResponse(404))
    with pytest.raises(FetchError, match="404"):
        ProxyClient().get_content("https://goproxy.io/x.com/y/@v/list")


def test_get_content_wraps_transport_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_get(url, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(proxy.requests, "get", _fake_get)
    with pytest.raises(FetchError, match="connection refused") as excinfo:
        ProxyClient().get_content("https://goproxy.io/x.com/y/@v/list")
    assert excinfo.value.subject == "https://goproxy.io/x.com/y/@v/list"
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)
