"""Domain port definitions for adapters."""

from __future__ import annotations

from .schema_source import SchemaSource

__all__ = ["SchemaSource"]
