"""Immutable value object holding attributes resolved across categories.

Properties and subobjects are treated symmetrically:
- shared items appear once with every contributing category recorded
- anything required by one category is required in the result
- ordering is first-seen across categories, inheritance order within each
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

SourcesByName: TypeAlias = "Mapping[str, tuple[str, ...]]"


def _frozen_sources(value: Mapping[str, Any]) -> SourcesByName:
    return MappingProxyType({name: tuple(sources) for name, sources in value.items()})


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolutionResult:
    required_properties: tuple[str, ...] = ()
    optional_properties: tuple[str, ...] = ()
    property_sources: SourcesByName = field(default_factory=dict, hash=False)
    required_subobjects: tuple[str, ...] = ()
    optional_subobjects: tuple[str, ...] = ()
    subobject_sources: SourcesByName = field(default_factory=dict, hash=False)
    category_names: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _set = object.__setattr__
        for name in (
            "required_properties",
            "optional_properties",
            "required_subobjects",
            "optional_subobjects",
            "category_names",
        ):
            _set(self, name, tuple(getattr(self, name)))
        _set(self, "property_sources", _frozen_sources(self.property_sources))
        _set(self, "subobject_sources", _frozen_sources(self.subobject_sources))

        if set(self.required_properties) & set(self.optional_properties):
            raise ValueError("Properties cannot be both required and optional in a result")
        if set(self.required_subobjects) & set(self.optional_subobjects):
            raise ValueError("Subobjects cannot be both required and optional in a result")

    @classmethod
    def empty(cls) -> ResolutionResult:
        return cls()

    @property
    def all_properties(self) -> tuple[str, ...]:
        return self.required_properties + self.optional_properties

    @property
    def all_subobjects(self) -> tuple[str, ...]:
        return self.required_subobjects + self.optional_subobjects

    def property_sources_for(self, name: str) -> tuple[str, ...]:
        return self.property_sources.get(name, ())

    def subobject_sources_for(self, name: str) -> tuple[str, ...]:
        return self.subobject_sources.get(name, ())

    def is_shared_property(self, name: str) -> bool:
        return len(self.property_sources_for(name)) > 1

    def is_shared_subobject(self, name: str) -> bool:
        return len(self.subobject_sources_for(name)) > 1

    def is_required_property(self, name: str) -> bool:
        return name in self.required_properties

    def is_required_subobject(self, name: str) -> bool:
        return name in self.required_subobjects

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view for downstream generators and API responses."""

        return {
            "categories": list(self.category_names),
            "properties": {
                "required": list(self.required_properties),
                "optional": list(self.optional_properties),
                "sources": {name: list(src) for name, src in self.property_sources.items()},
            },
            "subobjects": {
                "required": list(self.required_subobjects),
                "optional": list(self.optional_subobjects),
                "sources": {name: list(src) for name, src in self.subobject_sources.items()},
            },
        }


__all__ = ["ResolutionResult", "SourcesByName"]
