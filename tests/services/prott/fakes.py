from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from requests.exceptions import ConnectionError


@dataclass
class MockResponse:
    status_code: int = 200
    json_data: Any = None
    text_data: str | None = None
    reason: str = "OK"
    headers: dict[str, str] | None = None

    def json(self) -> Any:
        if self.json_data is None:
            if self.text_data:
                return json.loads(self.text_data)
            raise ValueError("JSON body not set")
        return self.json_data

    @property
    def content(self) -> bytes:
        if self.json_data is not None:
            return json.dumps(self.json_data).encode("utf-8")
        if self.text_data is not None:
            return self.text_data.encode("utf-8")
        return b""

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    def __post_init__(self) -> None:
        if self.headers is None:
            self.headers = {}


class FakeSession:
    """Stands in for ``requests.Session``; an exception in the queue is raised."""

    def __init__(self, responses: list[MockResponse | Exception]) -> None:
        self._responses = responses
        self.headers: dict[str, str] = {}
        self.verify = True
        self.trust_env = True
        self.proxies: dict[str, str] = {}
        self.calls: list[tuple[str, str]] = []
        self.call_kwargs: list[dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> MockResponse:
        if not self._responses:
            raise AssertionError("No more responses queued")
        self.calls.append((method, url))
        self.call_kwargs.append(kwargs)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


PROJECTS_PAYLOAD = {
    "1": {"Name": "Personal", "Projects": [{"id": "p1", "name": "Proj"}]},
    "2": {"Name": "Team", "Projects": [{"id": "p2", "name": "Other"}]},
}


def login_ok() -> MockResponse:
    return MockResponse(status_code=200, json_data={"id": 1})


def projects_ok(payload: dict[str, Any] | None = None) -> MockResponse:
    return MockResponse(status_code=200, json_data=payload if payload is not None else PROJECTS_PAYLOAD)


def upload_ok() -> MockResponse:
    return MockResponse(status_code=201, json_data={"id": 10}, reason="Created")


def transport_error() -> Exception:
    return ConnectionError("connection refused")
