from __future__ import annotations

from typing import Any, Callable

import pytest

from fakes import FakeSession
from protter.services.prott.client import ProttClient
from protter.services.prott.config import ProttConfig
from protter.services.prott.http import HttpClient


@pytest.fixture()
def config() -> ProttConfig:
    return ProttConfig(email="user@example.com", password="secret")


@pytest.fixture()
def make_http(config: ProttConfig) -> Callable[[list[Any]], tuple[HttpClient, FakeSession]]:
    def _build(responses: list[Any]) -> tuple[HttpClient, FakeSession]:
        session = FakeSession(list(responses))
        return HttpClient(config, session=session), session

    return _build


@pytest.fixture()
def make_client(make_http, config: ProttConfig) -> Callable[[list[Any]], tuple[ProttClient, FakeSession]]:
    def _build(responses: list[Any]) -> tuple[ProttClient, FakeSession]:
        http_client, session = make_http(responses)
        return ProttClient(config, http_client=http_client), session

    return _build


@pytest.fixture()
def export_tree(tmp_path):
    """Create ``design/exportedArtboards/{Proj,Unknown}`` with one png each."""

    base = tmp_path / "design" / "exportedArtboards"
    (base / "Proj").mkdir(parents=True)
    (base / "Unknown").mkdir(parents=True)
    (base / "Proj" / "A.png").write_bytes(b"\x89PNG-A")
    (base / "Unknown" / "B.png").write_bytes(b"\x89PNG-B")
    (tmp_path / "design" / "notes.txt").write_text("not an artboard", encoding="utf-8")
    return tmp_path
