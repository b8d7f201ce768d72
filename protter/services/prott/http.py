"""HTTP utilities for the Prott integration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from http.cookiejar import Cookie, DefaultCookiePolicy
from typing import Any, Mapping, MutableMapping

import requests
from publicsuffixlist import PublicSuffixList
from requests import Response
from requests.exceptions import RequestException, Timeout

from protter.core.logger import get_logger

from .config import ProttConfig
from .models import TransportError

LOGGER = get_logger()

USER_AGENT_HEADER = "User-Agent"
APP_TYPE_HEADER = "App-Type"


class PublicSuffixCookiePolicy(DefaultCookiePolicy):
    """Cookie policy refusing cookies scoped to a public suffix.

    ``DefaultCookiePolicy`` only knows a handful of hard-coded second level
    domains; this consults the full public suffix list instead.
    """

    def __init__(self, psl: PublicSuffixList | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._psl = psl or PublicSuffixList()

    def set_ok_domain(self, cookie: Cookie, request: Any) -> bool:
        if not super().set_ok_domain(cookie, request):
            return False
        if cookie.domain_specified:
            domain = cookie.domain.lstrip(".").lower()
            if self._psl.is_public(domain):
                LOGGER.debug("prott.http cookie_rejected name=%s domain=%s reason=public_suffix", cookie.name, domain)
                return False
        return True


def build_session() -> requests.Session:
    """Create the session shared by every request of a run."""

    session = requests.Session()
    session.cookies.set_policy(PublicSuffixCookiePolicy())
    return session


@dataclass(slots=True)
class RequestDiagnostics:
    """Captured diagnostics for troubleshooting."""

    method: str
    url: str
    header_keys: tuple[str, ...]
    status: int | None = None


class HttpClient:
    """Request helper attaching the fixed client headers to every call.

    No retries are performed and status codes are left to the caller.
    """

    def __init__(
        self,
        config: ProttConfig,
        *,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config
        self._session = session or build_session()
        self._session.verify = config.verify_tls
        self._session.trust_env = config.trust_env
        if config.proxies:
            self._session.proxies.update(config.proxies)
        self._logger = logger or LOGGER
        self._timeout = config.timeout_sec
        self.request_count = 0

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            USER_AGENT_HEADER: self._config.user_agent,
            APP_TYPE_HEADER: self._config.app_type,
        }

    def request(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        json_body: Mapping[str, object] | None = None,
        data: Mapping[str, str] | None = None,
        files: Mapping[str, object] | None = None,
    ) -> Response:
        """Send a request and return the response whatever its status.

        Raises:
            TransportError: When no response was received.
        """

        url = self._compose_url(path)
        request_headers: MutableMapping[str, str] = dict(self.default_headers)
        request_headers.update(headers or {})
        diagnostics = RequestDiagnostics(
            method=method,
            url=url,
            header_keys=tuple(sorted(request_headers.keys())),
        )
        self.request_count += 1
        try:
            response = self._session.request(
                method,
                url,
                headers=request_headers,
                json=json_body,
                data=data,
                files=files,
                timeout=self._timeout,
            )
        except Timeout as exc:
            self._logger.warning(
                "prott.http timeout method=%s url=%s",
                diagnostics.method,
                diagnostics.url,
            )
            raise TransportError("Request timed out", payload={"url": url}) from exc
        except RequestException as exc:
            self._logger.warning(
                "prott.http connection_error method=%s url=%s error=%s",
                diagnostics.method,
                diagnostics.url,
                type(exc).__name__,
            )
            raise TransportError(f"Request failed: {exc}", payload={"url": url}) from exc

        diagnostics.status = response.status_code
        self._logger.debug(
            "prott.http response method=%s url=%s status=%s header_keys=%s",
            diagnostics.method,
            diagnostics.url,
            diagnostics.status,
            ",".join(diagnostics.header_keys),
        )
        return response

    def close(self) -> None:
        self._session.close()

    # Internal helpers -------------------------------------------------

    def _compose_url(self, path: str) -> str:
        base = self._config.base_url.rstrip("/")
        if path.startswith("http://") or path.startswith("https://"):
            return path
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{base}{path}"


def safe_json(response: Response) -> dict[str, object]:
    """Best-effort JSON body used for error payloads."""

    try:
        data = response.json()
    except ValueError:
        text = response.text or ""
        if len(text) > 200:
            text = text[:200] + "..."
        return {"body": text}
    if isinstance(data, dict):
        return data
    return {"body": data}


__all__ = [
    "HttpClient",
    "PublicSuffixCookiePolicy",
    "build_session",
    "safe_json",
    "USER_AGENT_HEADER",
    "APP_TYPE_HEADER",
]
