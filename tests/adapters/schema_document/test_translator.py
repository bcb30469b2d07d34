from __future__ import annotations

from semschema.adapters.schema_document import (
    SchemaDocument,
    export_schema,
    translate_schema_document,
)
from semschema.adapters.schema_document.schema import CategoryPayload, PropertyPayload
from semschema.adapters.schema_document.translator import translate_category, translate_property


def _document() -> SchemaDocument:
    return SchemaDocument.model_validate(
        {
            "schemaVersion": "1.0",
            "categories": {
                "Agent": {"properties": {"required": ["Has name"]}},
                "Person": {
                    "parents": ["Agent"],
                    "label": "Human",
                    "properties": {"optional": ["Has email", "Has name"]},
                    "subgroups": {"optional": ["Address"]},
                    "display": {"header": ["Has name"]},
                },
            },
            "properties": {
                "Has name": {"datatype": "Text"},
                "Has email": {"datatype": "Email", "allowsMultipleValues": True},
                "Has street": {"datatype": "Text", "subpropertyOf": "Has name"},
            },
            "subobjects": {"Address": {"properties": {"required": ["Has street"]}}},
        }
    )


def test_translate_category_applies_record_normalization() -> None:
    payload = CategoryPayload.model_validate(
        {"parents": ["Agent", "Agent"], "properties": {"required": ["a"], "optional": ["a", "b"]}}
    )

    record = translate_category("Person", payload)

    assert record.parents == ("Agent",)
    assert record.label == "Person"
    assert record.required_properties == ("a",)
    assert record.optional_properties == ("b",)
    assert record.promoted_properties == ("a",)


def test_translate_property_maps_aliases() -> None:
    payload = PropertyPayload.model_validate(
        {"datatype": "Page", "rangeCategory": "Agent", "allowedValues": ["x"]}
    )

    record = translate_property("Has owner", payload)

    assert record.range_category == "Agent"
    assert record.allowed_values == ("x",)
    assert record.label == "Owner"


def test_translate_schema_document_builds_source() -> None:
    source = translate_schema_document(_document())

    person = source.categories()["Person"]
    assert person.label == "Human"
    assert person.optional_properties == ("Has email", "Has name")
    assert person.promoted_properties == ()
    assert person.optional_subobjects == ("Address",)
    assert dict(person.display) == {"header": ["Has name"]}
    assert source.subobjects()["Address"].required_properties == ("Has street",)
    assert source.properties()["Has street"].subproperty_of == "Has name"


def test_export_schema_is_readable_again() -> None:
    source = translate_schema_document(_document())

    exported = export_schema(source)
    reloaded = translate_schema_document(SchemaDocument.model_validate(exported))

    assert exported["schemaVersion"] == "1.0"
    assert exported["properties"]["Has email"] == {
        "datatype": "Email",
        "label": "Email",
        "description": "",
        "allowsMultipleValues": True,
    }
    assert dict(reloaded.categories()) == dict(source.categories())
    assert dict(reloaded.properties()) == dict(source.properties())
