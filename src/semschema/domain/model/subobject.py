"""Immutable schema-level representation of a subobject.

A subobject is a repeatable structured group of properties attached to a
category. It has no parents and no nested subobjects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .naming import generate_label, normalize_name, promote_required


@dataclass(frozen=True, slots=True, kw_only=True)
class SubobjectRecord:
    name: str
    label: str = ""
    description: str = ""
    required_properties: tuple[str, ...] = ()
    optional_properties: tuple[str, ...] = ()
    promoted_properties: tuple[str, ...] = field(
        default=(), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        name = normalize_name(self.name, kind="Subobject")
        required, optional, promoted = promote_required(
            self.required_properties, self.optional_properties
        )

        _set = object.__setattr__
        _set(self, "name", name)
        _set(self, "label", self.label.strip() or generate_label(name))
        _set(self, "description", self.description.strip())
        _set(self, "required_properties", required)
        _set(self, "optional_properties", optional)
        _set(self, "promoted_properties", promoted)

    @property
    def all_properties(self) -> tuple[str, ...]:
        return self.required_properties + self.optional_properties

    def is_required(self, property_name: str) -> bool:
        return property_name in self.required_properties

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "description": self.description,
            "properties": {
                "required": list(self.required_properties),
                "optional": list(self.optional_properties),
            },
        }
