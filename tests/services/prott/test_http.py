from __future__ import annotations

import urllib.request

import pytest
from requests.cookies import create_cookie
from requests.exceptions import ReadTimeout

from fakes import FakeSession, MockResponse
from protter.services.prott.config import ProttConfig
from protter.services.prott.http import HttpClient, PublicSuffixCookiePolicy, build_session
from protter.services.prott.models import TransportError


def _request(url: str) -> urllib.request.Request:
    return urllib.request.Request(url)


def test_policy_accepts_registrable_domain() -> None:
    policy = PublicSuffixCookiePolicy()
    cookie = create_cookie("_session", "abc", domain=".prottapp.com")
    assert policy.set_ok(cookie, _request("https://prottapp.com/users/sign_in.json"))


def test_policy_accepts_host_only_cookie() -> None:
    policy = PublicSuffixCookiePolicy()
    cookie = create_cookie("_session", "abc", domain="")
    cookie.domain = "prottapp.com"
    assert policy.set_ok(cookie, _request("https://prottapp.com/users/sign_in.json"))


def test_policy_rejects_public_suffix_domain() -> None:
    policy = PublicSuffixCookiePolicy()
    cookie = create_cookie("tracker", "x", domain=".github.io")
    assert not policy.set_ok(cookie, _request("https://someone.github.io/"))


def test_build_session_installs_policy() -> None:
    session = build_session()
    try:
        assert isinstance(session.cookies._policy, PublicSuffixCookiePolicy)
    finally:
        session.close()


def test_request_composes_url_and_headers(make_http) -> None:
    http_client, session = make_http([MockResponse()])
    http_client.request("GET", "api/sketch_app/projects.json", headers={"X-Extra": "1"})
    assert session.calls == [("GET", "https://prottapp.com/api/sketch_app/projects.json")]
    headers = session.call_kwargs[0]["headers"]
    assert headers == {"User-Agent": "sketch", "App-Type": "sketch", "X-Extra": "1"}


def test_request_uses_configured_base_url_and_timeout() -> None:
    config = ProttConfig(email="e", password="p", base_url="http://localhost:3000/", timeout_sec=5.0)
    session = FakeSession([MockResponse()])
    HttpClient(config, session=session).request("POST", "/users/sign_in.json")
    assert session.calls == [("POST", "http://localhost:3000/users/sign_in.json")]
    assert session.call_kwargs[0]["timeout"] == 5.0


def test_configured_timeout_is_not_reread_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROTT_TIMEOUT_SEC", "99")
    config = ProttConfig(email="e", password="p", timeout_sec=5.0)
    session = FakeSession([MockResponse()])
    HttpClient(config, session=session).request("GET", "/")
    assert session.call_kwargs[0]["timeout"] == 5.0


def test_timeout_becomes_transport_error(make_http) -> None:
    http_client, _ = make_http([ReadTimeout("slow")])
    with pytest.raises(TransportError):
        http_client.request("GET", "/")
