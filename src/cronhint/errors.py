"""Application-level exception types for cronhint."""

from __future__ import annotations


class CronhintError(Exception):
    """Base exception for cronhint."""


class ConfigurationError(CronhintError):
    """Base exception for configuration and startup validation errors."""


class InvalidInterpreterError(ConfigurationError):
    """Raised when a configured interpreter name can never match a shell word."""


class InvalidDeviceError(ConfigurationError):
    """Raised when a configured excluded device is not an absolute path."""


class CrontabReadError(CronhintError):
    """Raised when a crontab source cannot be read."""
