"""Custom exceptions used across protter."""


class ProtterError(Exception):
    """Base error for the application."""


class ConfigError(ProtterError):
    """Configuration related error."""
