"""Configuration loader for the Prott client."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from protter.core.logger import get_logger
from protter.core.profiles import resolve_config_path
from .models import ArgumentError

LOGGER = get_logger()

DEFAULT_BASE_URL = "https://prottapp.com"
DEFAULT_USER_AGENT = "sketch"
DEFAULT_APP_TYPE = "sketch"
DEFAULT_PROFILES_FILE = "profiles.yaml"

EMAIL_ENV = "PROTT_EMAIL"
PASSWORD_ENV = "PROTT_PASSWORD"
BASE_URL_ENV = "PROTT_BASE_URL"
TIMEOUT_ENV = "PROTT_TIMEOUT_SEC"


@dataclass(slots=True)
class ProttConfig:
    """Resolved configuration for Prott operations.

    ``timeout_sec`` defaults to ``None``: requests wait for the server
    indefinitely unless a timeout is configured.
    """

    email: str
    password: str
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    app_type: str = DEFAULT_APP_TYPE
    timeout_sec: float | None = None
    verify_tls: bool = True
    trust_env: bool = True
    proxies: Mapping[str, str] | None = None

    @classmethod
    def from_profile(cls, profile_name: str, *, config_path: str | Path | None = None) -> "ProttConfig":
        """Create a configuration instance from profiles.yaml.

        Args:
            profile_name: Logical profile name under the ``prott`` section.
            config_path: Optional override for the config file path.

        Returns:
            Parsed ``ProttConfig`` instance.

        Raises:
            ArgumentError: If the configuration cannot be loaded or is invalid.
        """

        raw = _load_profiles_file(path=config_path).get(profile_name)
        if raw is None:
            raise ArgumentError(f"prott profile '{profile_name}' not found in profiles.yaml")
        return cls.from_mapping(raw)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProttConfig":
        """Create a configuration instance from a mapping.

        Credentials may be omitted here; ``resolve_config`` fills them from
        the command line or the environment and validates the result.
        """

        timeout_val = data.get("timeout_sec")
        proxies_raw = data.get("proxies")
        proxies: Mapping[str, str] | None = None
        if isinstance(proxies_raw, Mapping):
            proxies = {k: _expand_env(v) for k, v in proxies_raw.items()}

        return cls(
            email=_expand_env(data.get("email") or ""),
            password=_expand_env(data.get("password") or ""),
            base_url=_expand_env(data.get("base_url", DEFAULT_BASE_URL)),
            user_agent=str(data.get("user_agent", DEFAULT_USER_AGENT)),
            app_type=str(data.get("app_type", DEFAULT_APP_TYPE)),
            timeout_sec=_parse_timeout(timeout_val, source="timeout_sec"),
            verify_tls=bool(data.get("verify_tls", True)),
            trust_env=bool(data.get("trust_env", True)),
            proxies=proxies,
        )


def _read_env(key: str) -> str | None:
    value = os.getenv(key)
    if value is None:
        return None
    return value.strip()


def _parse_timeout(value: Any, *, source: str) -> float | None:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:  # noqa: BLE001 - configuration validation
        raise ArgumentError(f"{source} must be a number") from exc
    if timeout <= 0:
        return None
    return timeout


def load_email(config: ProttConfig | None = None) -> str:
    """Return the account email from env or configuration."""

    value = _read_env(EMAIL_ENV) or (config.email if config else None)
    if not value:
        raise ArgumentError(f"Prott email not configured (use --prott-email or {EMAIL_ENV})")
    return value


def load_password(config: ProttConfig | None = None) -> str:
    """Return the account password from env or configuration."""

    value = os.getenv(PASSWORD_ENV) or (config.password if config else None)
    if not value:
        raise ArgumentError(f"Prott password not configured (use --prott-password or {PASSWORD_ENV})")
    return value


def load_base_url(config: ProttConfig | None = None) -> str:
    """Return the service base URL."""

    value = _read_env(BASE_URL_ENV) or (config.base_url if config else None)
    return value or DEFAULT_BASE_URL


def load_timeout(config: ProttConfig | None = None) -> float | None:
    """Return the request timeout in seconds, or ``None`` for no timeout."""

    value = _read_env(TIMEOUT_ENV)
    if value:
        return _parse_timeout(value, source=f"Environment variable {TIMEOUT_ENV}")
    if config:
        return config.timeout_sec
    return None


def resolve_config(
    profile: str | None = None,
    *,
    email: str | None = None,
    password: str | None = None,
    config_path: str | Path | None = None,
) -> ProttConfig:
    """Resolve configuration with precedence: arguments, environment, profile.

    Raises:
        ArgumentError: When credentials are missing or a value is invalid.
    """

    if profile:
        base = ProttConfig.from_profile(profile, config_path=config_path)
    else:
        base = ProttConfig(email="", password="")
    resolved = replace(
        base,
        email=email or load_email(base),
        password=password or load_password(base),
        base_url=load_base_url(base),
        timeout_sec=load_timeout(base),
    )
    LOGGER.debug(
        "prott.config resolved profile=%s base_url=%s timeout=%s",
        profile or "-",
        resolved.base_url,
        resolved.timeout_sec,
    )
    return resolved


def _expand_env(value: Any) -> Any:
    if isinstance(value, str):
        expanded = os.path.expandvars(value)
        if "${" in value and "}" in value and expanded == value:
            raise ArgumentError(f"Environment variable not set for value: {value}")
        return expanded
    return value


def _load_profiles_file(*, path: str | Path | None) -> dict[str, Mapping[str, Any]]:
    cfg_path = resolve_config_path(path or DEFAULT_PROFILES_FILE)
    if not cfg_path.exists():
        raise ArgumentError(f"profiles.yaml not found at {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    section = data.get("prott") if isinstance(data, Mapping) else None
    if not isinstance(section, Mapping):
        raise ArgumentError("profiles.yaml missing 'prott' section")
    profiles: dict[str, Mapping[str, Any]] = {}
    for key, value in section.items():
        if not isinstance(value, Mapping):
            LOGGER.warning("Ignoring prott profile %s with invalid type", key)
            continue
        profiles[str(key)] = value
    if not profiles:
        raise ArgumentError("No prott profiles defined in profiles.yaml")
    return profiles


__all__ = [
    "ProttConfig",
    "DEFAULT_BASE_URL",
    "EMAIL_ENV",
    "PASSWORD_ENV",
    "BASE_URL_ENV",
    "TIMEOUT_ENV",
    "load_email",
    "load_password",
    "load_base_url",
    "load_timeout",
    "resolve_config",
]
