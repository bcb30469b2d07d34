from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TypeAlias

import pytest

from semschema.adapters.memory import InMemorySchemaSource
from semschema.domain.model import CategoryRecord, PropertyRecord, SubobjectRecord

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

CategoryFactory: TypeAlias = "Callable[..., CategoryRecord]"


@pytest.fixture(scope="session")
def data_dir() -> Path:
    return Path(__file__).resolve().parent / "data"


@pytest.fixture
def make_category() -> CategoryFactory:
    def factory(
        name: str,
        *,
        parents: tuple[str, ...] = (),
        required: tuple[str, ...] = (),
        optional: tuple[str, ...] = (),
        required_subobjects: tuple[str, ...] = (),
        optional_subobjects: tuple[str, ...] = (),
    ) -> CategoryRecord:
        return CategoryRecord(
            name=name,
            parents=parents,
            required_properties=required,
            optional_properties=optional,
            required_subobjects=required_subobjects,
            optional_subobjects=optional_subobjects,
        )

    return factory


@pytest.fixture
def organization_categories(make_category: CategoryFactory) -> Mapping[str, CategoryRecord]:
    records = (
        make_category("Entity", required=("ID",)),
        make_category("Person", parents=("Entity",), required=("Name",)),
        make_category("Organization", parents=("Entity",), required=("TaxID",)),
    )
    return {record.name: record for record in records}


@pytest.fixture
def people_source() -> InMemorySchemaSource:
    """Small but complete schema: every reference resolves."""

    properties = [
        PropertyRecord(name="Has name", datatype="Text"),
        PropertyRecord(name="Has email", datatype="Email"),
        PropertyRecord(name="Has employer", datatype="Page", range_category="Organization"),
        PropertyRecord(name="Has street", datatype="Text"),
        PropertyRecord(name="Has city", datatype="Text"),
        PropertyRecord(name="Has student id", datatype="Text"),
    ]
    subobjects = [
        SubobjectRecord(
            name="Address",
            required_properties=("Has street",),
            optional_properties=("Has city",),
        ),
    ]
    display = {"header": ["Has name"], "sections": [{"name": "Main", "properties": ["Has name"]}]}
    forms = {"sections": [{"name": "Main", "properties": ["Has name"]}]}
    categories = [
        CategoryRecord(
            name="Agent",
            required_properties=("Has name",),
            display=display,
            forms=forms,
        ),
        CategoryRecord(
            name="Organization",
            parents=("Agent",),
            optional_properties=("Has email",),
            display=display,
            forms=forms,
        ),
        CategoryRecord(
            name="Person",
            parents=("Agent",),
            optional_properties=("Has email",),
            optional_subobjects=("Address",),
            display=display,
            forms=forms,
        ),
        CategoryRecord(
            name="Employee",
            parents=("Person",),
            required_properties=("Has employer",),
            required_subobjects=("Address",),
            display=display,
            forms=forms,
        ),
        CategoryRecord(
            name="Student",
            parents=("Person",),
            required_properties=("Has student id",),
            display=display,
            forms=forms,
        ),
    ]
    return InMemorySchemaSource.from_records(
        categories=categories,
        subobjects=subobjects,
        properties=properties,
    )
