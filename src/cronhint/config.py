"""Configuration management for cronhint."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cronhint.core.log_files import DEFAULT_EXCLUDED_DEVICES, LogFileExtractor
from cronhint.core.script_path import DEFAULT_INTERPRETERS, ScriptPathExtractor
from cronhint.errors import InvalidDeviceError, InvalidInterpreterError


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CRONHINT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Parsing Configuration
    interpreters: set[str] = Field(
        default_factory=lambda: set(DEFAULT_INTERPRETERS),
        description="Program names whose next argument is the script being run",
    )
    excluded_devices: set[str] = Field(
        default_factory=lambda: set(DEFAULT_EXCLUDED_DEVICES),
        description="Redirection targets never reported as log files",
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")


def get_settings(**overrides: object) -> Settings:
    """Get application settings.

    Values come from ``CRONHINT_*`` environment variables and ``.env``;
    keyword overrides win over both.
    """
    return Settings(**overrides)


def build_extractors(settings: Settings) -> tuple[ScriptPathExtractor, LogFileExtractor]:
    """Validate parsing settings and build the two extractors from them."""

    for name in settings.interpreters:
        if not name or name != name.strip() or any(ch.isspace() for ch in name):
            raise InvalidInterpreterError(f"invalid interpreter name: {name!r}")
    for device in settings.excluded_devices:
        if not device.startswith("/"):
            raise InvalidDeviceError(f"excluded device must be an absolute path: {device!r}")

    return (
        ScriptPathExtractor(settings.interpreters),
        LogFileExtractor(settings.excluded_devices),
    )
