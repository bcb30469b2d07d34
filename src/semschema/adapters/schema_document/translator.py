"""Translate schema document payloads into schema records and back."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from semschema.adapters.memory import InMemorySchemaSource
from semschema.domain.model import CategoryRecord, PropertyRecord, SubobjectRecord

if TYPE_CHECKING:
    from semschema.domain.ports import SchemaSource

    from .schema import CategoryPayload, PropertyPayload, SchemaDocument, SubobjectPayload

SCHEMA_VERSION = "1.0"


def translate_category(name: str, payload: CategoryPayload) -> CategoryRecord:
    return CategoryRecord(
        name=name,
        parents=tuple(payload.parents),
        label=payload.label or "",
        description=payload.description or "",
        target_namespace=payload.target_namespace,
        required_properties=tuple(payload.properties.required),
        optional_properties=tuple(payload.properties.optional),
        required_subobjects=tuple(payload.subobjects.required),
        optional_subobjects=tuple(payload.subobjects.optional),
        display=payload.display,
        forms=payload.forms,
    )


def translate_subobject(name: str, payload: SubobjectPayload) -> SubobjectRecord:
    return SubobjectRecord(
        name=name,
        label=payload.label or "",
        description=payload.description or "",
        required_properties=tuple(payload.properties.required),
        optional_properties=tuple(payload.properties.optional),
    )


def translate_property(name: str, payload: PropertyPayload) -> PropertyRecord:
    return PropertyRecord(
        name=name,
        datatype=payload.datatype,
        label=payload.label or "",
        description=payload.description or "",
        allowed_values=tuple(payload.allowed_values),
        range_category=payload.range_category,
        subproperty_of=payload.subproperty_of,
        allows_multiple_values=payload.allows_multiple_values,
    )


def translate_schema_document(document: SchemaDocument) -> InMemorySchemaSource:
    return InMemorySchemaSource.from_records(
        categories=[
            translate_category(name, payload) for name, payload in document.categories.items()
        ],
        subobjects=[
            translate_subobject(name, payload) for name, payload in document.subobjects.items()
        ],
        properties=[
            translate_property(name, payload) for name, payload in document.properties.items()
        ],
    )


def export_schema(source: SchemaSource) -> dict[str, Any]:
    """Return a plain document for ``source`` in the shape ``SchemaDocument`` reads."""

    document: dict[str, Any] = {
        "schemaVersion": SCHEMA_VERSION,
        "categories": {name: record.to_dict() for name, record in source.categories().items()},
        "properties": {
            name: _property_to_dict(record) for name, record in source.properties().items()
        },
    }
    subobjects = source.subobjects()
    if subobjects:
        document["subobjects"] = {name: record.to_dict() for name, record in subobjects.items()}
    return document


def _property_to_dict(record: PropertyRecord) -> dict[str, Any]:
    out: dict[str, Any] = {
        "datatype": record.datatype,
        "label": record.label,
        "description": record.description,
    }
    if record.allowed_values:
        out["allowedValues"] = list(record.allowed_values)
    if record.range_category is not None:
        out["rangeCategory"] = record.range_category
    if record.subproperty_of is not None:
        out["subpropertyOf"] = record.subproperty_of
    if record.allows_multiple_values:
        out["allowsMultipleValues"] = True
    return out
