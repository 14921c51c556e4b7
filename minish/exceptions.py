"""Exception types raised inside minish."""

from __future__ import annotations


class ShellError(Exception):
    """Base exception for user-facing shell failures."""


class RedirectionError(ShellError):
    """Raised when a redirection target cannot be opened."""


class ConfigurationError(ShellError):
    """Raised when startup settings are invalid."""


__all__ = ["ShellError", "RedirectionError", "ConfigurationError"]
