"""Port through which the resolution core receives schema records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from semschema.domain.model import CategoryRecord, PropertyRecord, SubobjectRecord


@runtime_checkable
class SchemaSource(Protocol):
    """Read-only view of the entity graph store, keyed by record name."""

    def categories(self) -> Mapping[str, CategoryRecord]: ...

    def subobjects(self) -> Mapping[str, SubobjectRecord]: ...

    def properties(self) -> Mapping[str, PropertyRecord]: ...


__all__ = ["SchemaSource"]
