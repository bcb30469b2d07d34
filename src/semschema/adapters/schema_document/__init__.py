"""Schema document adapter package (JSON/YAML files)."""

from __future__ import annotations

from .compare import FieldChange, ModifiedEntry, SchemaDiff, SectionDiff, compare_schemas
from .loader import (
    DocumentFormat,
    SchemaDocumentError,
    detect_format,
    dump_schema_document,
    load_schema_file,
    parse_schema_document,
)
from .schema import (
    BucketsPayload,
    CategoryPayload,
    PropertyPayload,
    SchemaDocument,
    SubobjectPayload,
)
from .translator import (
    export_schema,
    translate_category,
    translate_property,
    translate_schema_document,
    translate_subobject,
)

__all__ = [
    "BucketsPayload",
    "CategoryPayload",
    "DocumentFormat",
    "FieldChange",
    "ModifiedEntry",
    "PropertyPayload",
    "SchemaDiff",
    "SchemaDocument",
    "SchemaDocumentError",
    "SectionDiff",
    "SubobjectPayload",
    "compare_schemas",
    "detect_format",
    "dump_schema_document",
    "export_schema",
    "load_schema_file",
    "parse_schema_document",
    "translate_category",
    "translate_property",
    "translate_schema_document",
    "translate_subobject",
]
