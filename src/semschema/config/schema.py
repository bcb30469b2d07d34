"""Schema document location configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import require_env_vars


@dataclass(frozen=True, slots=True)
class SchemaConfig:
    schema_path: Path

    def resolve_schema_path(self) -> Path:
        return self.schema_path.expanduser().resolve()


def get_schema_config() -> SchemaConfig:
    values = require_env_vars(("SEMSCHEMA_SCHEMA_PATH",))
    return SchemaConfig(schema_path=Path(values["SEMSCHEMA_SCHEMA_PATH"].strip()))
