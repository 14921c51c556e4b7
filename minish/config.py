"""Startup settings read from the process environment."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def split_search_path(value: str | None) -> tuple[str, ...]:
    """Split ``PATH``; an empty entry stands for the working directory."""
    if not value:
        return ()
    return tuple(entry or os.curdir for entry in value.split(os.pathsep))


def _check_log_level(level: str) -> str:
    normalized = level.strip().upper()
    if normalized not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}'")
    return normalized


def normalize_log_level(level: str) -> str:
    try:
        return _check_log_level(level)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


class ShellSettings(BaseSettings):
    """Shell settings.

    ``PATH`` and ``HOME`` are read under their usual names, everything else
    with the ``MINISH_`` prefix.
    """

    path: str = Field(default="", validation_alias="PATH", description="Command search path")
    home: str = Field(
        default_factory=lambda: str(Path.home()),
        validation_alias="HOME",
        description="Directory '~' expands to",
    )
    prompt: str = Field(default="$ ", description="Prompt shown before each line")
    log_level: str = Field(default="WARNING", description="Log level")

    model_config = SettingsConfigDict(
        env_prefix="MINISH_",
        case_sensitive=False,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _valid_log_level(cls, value: str) -> str:
        return _check_log_level(value)

    @property
    def search_path(self) -> tuple[str, ...]:
        return split_search_path(self.path)

    @classmethod
    def from_env(cls) -> "ShellSettings":
        """Load settings from the environment, raising ``ConfigurationError`` on bad values."""
        try:
            return cls()
        except ValidationError as exc:
            problems = "; ".join(error["msg"] for error in exc.errors())
            raise ConfigurationError(problems) from exc


__all__ = ["ShellSettings", "normalize_log_level", "split_search_path"]
