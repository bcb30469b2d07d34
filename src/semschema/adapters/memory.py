"""In-memory schema source."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from semschema.domain.model import CategoryRecord, PropertyRecord, SubobjectRecord


@dataclass(slots=True)
class InMemorySchemaSource:
    """Records keyed by name; the mappings handed out are read-only views."""

    _categories: dict[str, CategoryRecord] = field(default_factory=dict[str, "CategoryRecord"])
    _subobjects: dict[str, SubobjectRecord] = field(default_factory=dict[str, "SubobjectRecord"])
    _properties: dict[str, PropertyRecord] = field(default_factory=dict[str, "PropertyRecord"])

    @classmethod
    def from_records(
        cls,
        *,
        categories: Iterable[CategoryRecord] = (),
        subobjects: Iterable[SubobjectRecord] = (),
        properties: Iterable[PropertyRecord] = (),
    ) -> InMemorySchemaSource:
        return cls(
            _categories={record.name: record for record in categories},
            _subobjects={record.name: record for record in subobjects},
            _properties={record.name: record for record in properties},
        )

    def categories(self) -> Mapping[str, CategoryRecord]:
        return MappingProxyType(self._categories)

    def subobjects(self) -> Mapping[str, SubobjectRecord]:
        return MappingProxyType(self._subobjects)

    def properties(self) -> Mapping[str, PropertyRecord]:
        return MappingProxyType(self._properties)


__all__ = ["InMemorySchemaSource"]
