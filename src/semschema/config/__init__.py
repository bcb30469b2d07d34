"""Application configuration helpers."""

from __future__ import annotations

from semschema.common.logging import configure_logging

from .env import env_flag, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .resolution import CheckConfig, ResolutionConfig, get_check_config, get_resolution_config
from .schema import SchemaConfig, get_schema_config

__all__ = [
    "CheckConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "ResolutionConfig",
    "SchemaConfig",
    "configure_logging",
    "env_flag",
    "get_check_config",
    "get_resolution_config",
    "get_schema_config",
    "require_env_vars",
]
