"""Immutable schema-level representation of a property.

Properties are global: one name denotes exactly one definition, so categories
can never disagree about a property's datatype. The resolution core only uses
property records to check that references exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from .naming import generate_label, normalize_name, normalize_names


def _optional_name(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


@dataclass(frozen=True, slots=True, kw_only=True)
class PropertyRecord:
    name: str
    datatype: str
    label: str = ""
    description: str = ""
    allowed_values: tuple[str, ...] = ()
    range_category: str | None = None
    subproperty_of: str | None = None
    allows_multiple_values: bool = False

    def __post_init__(self) -> None:
        name = normalize_name(self.name, kind="Property")
        datatype = self.datatype.strip()
        if not datatype:
            raise ValueError(f"Property '{name}' must define a datatype")

        _set = object.__setattr__
        _set(self, "name", name)
        _set(self, "datatype", datatype)
        _set(self, "label", self.label.strip() or generate_label(name))
        _set(self, "description", self.description.strip())
        _set(self, "allowed_values", normalize_names(self.allowed_values))
        _set(self, "range_category", _optional_name(self.range_category))
        _set(self, "subproperty_of", _optional_name(self.subproperty_of))

    @property
    def has_allowed_values(self) -> bool:
        return bool(self.allowed_values)

    @property
    def is_page_type(self) -> bool:
        return self.datatype == "Page"
