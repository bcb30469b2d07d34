"""Configuration error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """Raised when an environment variable holds an unusable value."""

    def __init__(self, message: str, *, variables: Iterable[str] = ()) -> None:
        self.variables = tuple(variables)
        super().__init__(message)


class MissingConfigurationError(ConfigurationError):
    """Raised when required environment variables are absent or blank."""
