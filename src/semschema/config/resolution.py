"""Resolution and consistency-check configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_flag


@dataclass(frozen=True, slots=True)
class ResolutionConfig:
    # absent parents are treated as empty roots instead of raising
    allow_missing_parents: bool = False


@dataclass(frozen=True, slots=True)
class CheckConfig:
    warn_missing_display: bool = True
    warn_missing_forms: bool = True
    warn_naming: bool = True


def get_resolution_config() -> ResolutionConfig:
    return ResolutionConfig(
        allow_missing_parents=env_flag("SEMSCHEMA_ALLOW_MISSING_PARENTS", default=False),
    )


def get_check_config() -> CheckConfig:
    return CheckConfig(
        warn_missing_display=env_flag("SEMSCHEMA_WARN_MISSING_DISPLAY", default=True),
        warn_missing_forms=env_flag("SEMSCHEMA_WARN_MISSING_FORMS", default=True),
        warn_naming=env_flag("SEMSCHEMA_WARN_NAMING", default=True),
    )
