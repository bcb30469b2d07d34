"""Immutable schema-level representation of a category.

A category names its parents (declaration order is the linearization
tie-break) and declares required/optional buckets for properties and
subobjects. Overlapping buckets are normalized at construction: the overlapping
names stay required only, and are remembered in ``promoted_*`` for reporting.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .naming import InvalidNameError, normalize_name, normalize_names, promote_required


def _frozen_mapping(value: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(value or {}))


@dataclass(frozen=True, slots=True, kw_only=True)
class CategoryRecord:
    name: str
    parents: tuple[str, ...] = ()
    label: str = ""
    description: str = ""
    target_namespace: str | None = None
    required_properties: tuple[str, ...] = ()
    optional_properties: tuple[str, ...] = ()
    required_subobjects: tuple[str, ...] = ()
    optional_subobjects: tuple[str, ...] = ()
    display: Mapping[str, Any] = field(default_factory=dict, hash=False)
    forms: Mapping[str, Any] = field(default_factory=dict, hash=False)
    promoted_properties: tuple[str, ...] = field(
        default=(), init=False, repr=False, compare=False
    )
    promoted_subobjects: tuple[str, ...] = field(
        default=(), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        name = normalize_name(self.name, kind="Category")
        parents = tuple(
            normalize_name(parent, kind="Parent category")
            for parent in normalize_names(self.parents)
        )
        if name in parents:
            raise InvalidNameError(f"Category '{name}' cannot be its own parent")

        required_props, optional_props, promoted_props = promote_required(
            self.required_properties, self.optional_properties
        )
        required_subs, optional_subs, promoted_subs = promote_required(
            self.required_subobjects, self.optional_subobjects
        )
        namespace = (self.target_namespace or "").strip() or None

        _set = object.__setattr__
        _set(self, "name", name)
        _set(self, "parents", parents)
        _set(self, "label", self.label.strip() or name)
        _set(self, "description", self.description.strip())
        _set(self, "target_namespace", namespace)
        _set(self, "required_properties", required_props)
        _set(self, "optional_properties", optional_props)
        _set(self, "required_subobjects", required_subs)
        _set(self, "optional_subobjects", optional_subs)
        _set(self, "display", _frozen_mapping(self.display))
        _set(self, "forms", _frozen_mapping(self.forms))
        _set(self, "promoted_properties", promoted_props)
        _set(self, "promoted_subobjects", promoted_subs)

    @property
    def all_properties(self) -> tuple[str, ...]:
        return self.required_properties + self.optional_properties

    @property
    def all_subobjects(self) -> tuple[str, ...]:
        return self.required_subobjects + self.optional_subobjects

    @property
    def has_subobjects(self) -> bool:
        return bool(self.required_subobjects or self.optional_subobjects)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "parents": list(self.parents),
            "label": self.label,
            "description": self.description,
            "properties": {
                "required": list(self.required_properties),
                "optional": list(self.optional_properties),
            },
        }
        if self.has_subobjects:
            out["subobjects"] = {
                "required": list(self.required_subobjects),
                "optional": list(self.optional_subobjects),
            }
        if self.display:
            out["display"] = dict(self.display)
        if self.forms:
            out["forms"] = dict(self.forms)
        if self.target_namespace is not None:
            out["targetNamespace"] = self.target_namespace
        return out
