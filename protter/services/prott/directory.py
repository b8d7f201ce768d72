"""Project listing helpers for Prott."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Mapping

from protter.core.logger import get_logger

from .http import HttpClient
from .models import Account, FetchError, Project, TransportError

LOGGER = get_logger()

PROJECTS_PATH = "/api/sketch_app/projects.json"


class DirectoryClient:
    """Fetch the caller's projects, grouped by account on the wire."""

    def __init__(self, http_client: HttpClient, *, logger: logging.Logger | None = None) -> None:
        self._http = http_client
        self._logger = logger or LOGGER

    def list_accounts(self) -> list[Account]:
        """Return the accounts of the listing endpoint in response order.

        Raises:
            FetchError: When the listing is unavailable or malformed.
        """

        try:
            response = self._http.request(
                "GET",
                PROJECTS_PATH,
                headers={"Content-Type": "application/json"},
            )
        except TransportError as exc:
            raise FetchError(f"failed to get projects: {exc}", payload=exc.payload) from exc

        if response.status_code != 200:
            raise FetchError("failed to get projects", status_code=response.status_code)
        if not response.content:
            raise FetchError("failed to get projects: empty response body", status_code=response.status_code)
        try:
            payload = json.loads(response.content)
        except ValueError as exc:
            raise FetchError("failed to get projects: invalid JSON") from exc

        accounts = parse_accounts(payload)
        self._logger.info(
            "prott.directory listed accounts=%d projects=%d",
            len(accounts),
            sum(len(account.projects) for account in accounts),
        )
        return accounts

    def list_projects(self) -> list[Project]:
        """Return every project of every account as one flat list."""

        projects: list[Project] = []
        for account in self.list_accounts():
            projects.extend(account.projects)
        return projects


def parse_accounts(payload: Any) -> list[Account]:
    """Decode ``{<key>: {"Name": ..., "Projects": [...]}}`` into accounts.

    Field names are matched case-insensitively. A JSON ``null`` body decodes
    to no accounts.
    """

    if payload is None:
        return []
    if not isinstance(payload, Mapping):
        raise FetchError("failed to get projects: expected an object of accounts")
    accounts: list[Account] = []
    for key, raw in payload.items():
        if raw is None:
            accounts.append(Account(key=str(key), name=""))
            continue
        if not isinstance(raw, Mapping):
            raise FetchError(f"failed to get projects: account {key!r} is not an object")
        name = _field(raw, "name")
        raw_projects = _field(raw, "projects")
        if raw_projects is None:
            raw_projects = []
        if not isinstance(raw_projects, list):
            raise FetchError(f"failed to get projects: projects of account {key!r} is not a list")
        accounts.append(
            Account(
                key=str(key),
                name=_scalar(name, "account name"),
                projects=tuple(_parse_project(item) for item in raw_projects),
            )
        )
    return accounts


def index_projects(projects: Iterable[Project]) -> dict[str, Project]:
    """Map project names to projects; a later duplicate replaces an earlier one."""

    index: dict[str, Project] = {}
    for project in projects:
        index[project.name] = project
    return index


def _parse_project(raw: Any) -> Project:
    if not isinstance(raw, Mapping):
        raise FetchError("failed to get projects: project entry is not an object")
    return Project(
        id=_scalar(_field(raw, "id"), "project id"),
        name=_scalar(_field(raw, "name"), "project name"),
    )


def _field(raw: Mapping[str, Any], name: str) -> Any:
    if name in raw:
        return raw[name]
    lowered = name.lower()
    for key, value in raw.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value
    return None


def _scalar(value: Any, label: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise FetchError(f"failed to get projects: {label} has unexpected type {type(value).__name__}")
    return str(value)


__all__ = ["DirectoryClient", "PROJECTS_PATH", "parse_accounts", "index_projects"]
