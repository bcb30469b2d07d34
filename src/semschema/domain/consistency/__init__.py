"""Schema-wide consistency checks producing ``(errors, warnings)`` reports."""

from __future__ import annotations

from .checker import CheckOptions, ConsistencyRule, check_schema
from .report import ConsistencyReport, format_error, format_warning

__all__ = [
    "CheckOptions",
    "ConsistencyReport",
    "ConsistencyRule",
    "check_schema",
    "format_error",
    "format_warning",
]
