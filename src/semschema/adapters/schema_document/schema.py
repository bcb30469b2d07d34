"""Pydantic models describing schema documents (JSON or YAML)."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _none_to_empty(value: object) -> object:
    return {} if value is None else value


class SchemaDocumentBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class BucketsPayload(SchemaDocumentBaseModel):
    required: list[str] = Field(default_factory=list)
    optional: list[str] = Field(default_factory=list)

    @field_validator("required", "optional", mode="before")
    @classmethod
    def _none_to_list(cls, value: object) -> object:
        return [] if value is None else value


class CategoryPayload(SchemaDocumentBaseModel):
    parents: list[str] = Field(default_factory=list)
    label: str | None = None
    description: str | None = None
    target_namespace: str | None = Field(default=None, alias="targetNamespace")
    properties: BucketsPayload = Field(default_factory=BucketsPayload)
    subobjects: BucketsPayload = Field(
        default_factory=BucketsPayload,
        validation_alias=AliasChoices("subobjects", "subgroups"),
    )
    display: dict[str, Any] = Field(default_factory=dict)
    forms: dict[str, Any] = Field(default_factory=dict)

    _normalize_text = field_validator("label", "description", "target_namespace", mode="before")(
        _blank_to_none
    )
    _normalize_config = field_validator("display", "forms", mode="before")(_none_to_empty)

    @field_validator("parents", mode="before")
    @classmethod
    def _none_to_list(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator("properties", "subobjects", mode="before")
    @classmethod
    def _none_to_buckets(cls, value: object) -> object:
        return {} if value is None else value


class SubobjectPayload(SchemaDocumentBaseModel):
    label: str | None = None
    description: str | None = None
    properties: BucketsPayload = Field(default_factory=BucketsPayload)

    _normalize_text = field_validator("label", "description", mode="before")(_blank_to_none)

    @field_validator("properties", mode="before")
    @classmethod
    def _none_to_buckets(cls, value: object) -> object:
        return {} if value is None else value


class PropertyPayload(SchemaDocumentBaseModel):
    datatype: str = Field(min_length=1)
    label: str | None = None
    description: str | None = None
    allowed_values: list[str] = Field(default_factory=list, alias="allowedValues")
    range_category: str | None = Field(default=None, alias="rangeCategory")
    subproperty_of: str | None = Field(default=None, alias="subpropertyOf")
    allows_multiple_values: bool = Field(default=False, alias="allowsMultipleValues")

    _normalize_text = field_validator(
        "datatype", "label", "description", "range_category", "subproperty_of", mode="before"
    )(_blank_to_none)


class SchemaDocument(SchemaDocumentBaseModel):
    schema_version: str = Field(alias="schemaVersion")
    categories: dict[str, CategoryPayload]
    properties: dict[str, PropertyPayload]
    subobjects: dict[str, SubobjectPayload] = Field(default_factory=dict)

    @field_validator("schema_version", mode="before")
    @classmethod
    def _stringify_version(cls, value: object) -> object:
        if isinstance(value, int | float):
            return str(value)
        return value

    @field_validator("subobjects", mode="before")
    @classmethod
    def _none_to_mapping(cls, value: object) -> object:
        return _none_to_empty(value)
