"""Field-level comparison of two schema sources.

Both sources are exported to the document shape first, so the diff speaks in
document field names (``parents``, ``properties.required``, ``allowedValues``).
Name lists are compared as sets; layout blocks and scalar fields must match
exactly.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .translator import export_schema

if TYPE_CHECKING:
    from semschema.domain.ports import SchemaSource

log = logging.getLogger(__name__)

_BUCKET_FIELDS = frozenset({"properties", "subobjects"})
_UNORDERED_FIELDS = frozenset(
    {
        "parents",
        "properties.required",
        "properties.optional",
        "subobjects.required",
        "subobjects.optional",
        "allowedValues",
    }
)


@dataclass(frozen=True, slots=True)
class FieldChange:
    old: Any
    new: Any


@dataclass(frozen=True, slots=True)
class ModifiedEntry:
    """A record present on both sides whose fields differ."""

    name: str
    changes: Mapping[str, FieldChange]

    def __post_init__(self) -> None:
        object.__setattr__(self, "changes", MappingProxyType(dict(self.changes)))


@dataclass(frozen=True, slots=True)
class SectionDiff:
    """Names are sorted within each bucket."""

    added: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()
    modified: tuple[ModifiedEntry, ...] = ()
    unchanged: tuple[str, ...] = ()

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed or self.modified)

    def summary_lines(self, title: str) -> list[str]:
        return [
            f"{title}:",
            f"  Added: {len(self.added)}",
            f"  Removed: {len(self.removed)}",
            f"  Modified: {len(self.modified)}",
            f"  Unchanged: {len(self.unchanged)}",
        ]


@dataclass(frozen=True, slots=True)
class SchemaDiff:
    categories: SectionDiff = SectionDiff()
    properties: SectionDiff = SectionDiff()
    subobjects: SectionDiff = SectionDiff()

    @property
    def has_changes(self) -> bool:
        return (
            self.categories.has_changes
            or self.properties.has_changes
            or self.subobjects.has_changes
        )

    def summary(self) -> str:
        lines = [
            *self.categories.summary_lines("Categories"),
            "",
            *self.properties.summary_lines("Properties"),
            "",
            *self.subobjects.summary_lines("Subobjects"),
        ]
        return "\n".join(lines)


def compare_schemas(new: SchemaSource, old: SchemaSource) -> SchemaDiff:
    """Diff ``new`` against ``old``; "added" means present only in ``new``."""

    new_document = export_schema(new)
    old_document = export_schema(old)
    diff = SchemaDiff(
        categories=_compare_section(
            new_document.get("categories", {}), old_document.get("categories", {})
        ),
        properties=_compare_section(
            new_document.get("properties", {}), old_document.get("properties", {})
        ),
        subobjects=_compare_section(
            new_document.get("subobjects", {}), old_document.get("subobjects", {})
        ),
    )
    log.debug("Schema comparison: %s", diff.summary().replace("\n", " | "))
    return diff


def _compare_section(
    new: Mapping[str, Mapping[str, Any]],
    old: Mapping[str, Mapping[str, Any]],
) -> SectionDiff:
    added: list[str] = []
    removed: list[str] = []
    modified: list[ModifiedEntry] = []
    unchanged: list[str] = []
    for name in sorted(new.keys() | old.keys()):
        if name not in old:
            added.append(name)
        elif name not in new:
            removed.append(name)
        elif changes := _diff_fields(new[name], old[name]):
            modified.append(ModifiedEntry(name=name, changes=changes))
        else:
            unchanged.append(name)

    return SectionDiff(
        added=tuple(added),
        removed=tuple(removed),
        modified=tuple(modified),
        unchanged=tuple(unchanged),
    )


def _diff_fields(new: Mapping[str, Any], old: Mapping[str, Any]) -> dict[str, FieldChange]:
    new_fields = _flatten(new)
    old_fields = _flatten(old)
    changes: dict[str, FieldChange] = {}
    for key in sorted(new_fields.keys() | old_fields.keys()):
        unordered = key in _UNORDERED_FIELDS
        default: Any = [] if unordered else None
        new_value = new_fields.get(key, default)
        old_value = old_fields.get(key, default)
        if unordered:
            differs = sorted(map(str, new_value)) != sorted(map(str, old_value))
        else:
            differs = new_value != old_value
        if differs:
            changes[key] = FieldChange(old=old_value, new=new_value)
    return changes


def _flatten(data: Mapping[str, Any]) -> dict[str, Any]:
    # "properties": {"required": [...]} becomes "properties.required": [...]
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if key in _BUCKET_FIELDS and isinstance(value, Mapping):
            for bucket, names in value.items():
                flat[f"{key}.{bucket}"] = names
        else:
            flat[key] = value
    return flat


__all__ = ["FieldChange", "ModifiedEntry", "SchemaDiff", "SectionDiff", "compare_schemas"]
