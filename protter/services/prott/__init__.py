"""Prott service integration."""

from .client import ProttClient
from .config import ProttConfig, resolve_config
from .paths import ArtboardMatcher

__all__ = [
    "ProttClient",
    "ProttConfig",
    "resolve_config",
    "ArtboardMatcher",
]
