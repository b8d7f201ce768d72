"""Domain models and exceptions for the Prott integration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from protter.core.errors import ConfigError


class ProttError(RuntimeError):
    """Base error raised for Prott failures."""

    def __init__(self, message: str, *, status_code: int | None = None, payload: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload or {}


class ArgumentError(ProttError, ConfigError):
    """Raised when required input (credentials, settings) is missing or invalid."""


class AuthError(ProttError):
    """Raised when signing in to Prott is rejected or cannot be attempted."""


class FetchError(ProttError):
    """Raised when the project listing is unavailable or malformed."""


class UploadError(ProttError):
    """Raised when a screen file cannot be read or the upload cannot be sent."""


class WalkError(ProttError):
    """Raised when the export directory tree cannot be traversed."""


class TransportError(ProttError):
    """Raised by the HTTP layer when a request never produced a response."""


@dataclass(frozen=True, slots=True)
class Project:
    """A Prott project; ``name`` is the key local folders are matched against."""

    id: str
    name: str


@dataclass(frozen=True, slots=True)
class Account:
    """An account entry of the listing endpoint with its projects."""

    key: str
    name: str
    projects: tuple[Project, ...] = ()


@dataclass(frozen=True, slots=True)
class LoginCredentials:
    """Email/password pair submitted to the sign-in endpoint."""

    email: str
    password: str

    def to_payload(self) -> dict[str, dict[str, str]]:
        return {"user": {"email": self.email, "password": self.password}}

    def __repr__(self) -> str:
        return f"LoginCredentials(email={self.email!r}, password='***')"


@dataclass(frozen=True, slots=True)
class ArtboardPath:
    """An exported artboard image recognised on disk."""

    project_name: str
    screen_name: str
    path: str


@dataclass(frozen=True, slots=True)
class ScreenUpload:
    """Outcome of a screen upload request.

    The HTTP status is recorded but not validated; ``ok`` is informational.
    """

    project: Project
    screen_name: str
    path: str
    status_code: int
    reason: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def status_line(self) -> str:
        if self.reason:
            return f"{self.status_code} {self.reason}"
        return str(self.status_code)


@dataclass(slots=True)
class WalkStats:
    """Counters collected while walking an export tree."""

    visited: int = 0
    matched: int = 0
    uploaded: int = 0
    unknown: int = 0


__all__ = [
    "ProttError",
    "ArgumentError",
    "AuthError",
    "FetchError",
    "UploadError",
    "WalkError",
    "TransportError",
    "Project",
    "Account",
    "LoginCredentials",
    "ArtboardPath",
    "ScreenUpload",
    "WalkStats",
]
