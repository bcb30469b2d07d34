from __future__ import annotations

import pytest

from semschema.domain.model import PropertyRecord


def test_property_requires_datatype() -> None:
    with pytest.raises(ValueError, match="must define a datatype"):
        PropertyRecord(name="Has name", datatype="  ")


def test_property_normalizes_optional_references() -> None:
    record = PropertyRecord(
        name="Has employer",
        datatype="Page",
        range_category="  ",
        subproperty_of=" Has relation ",
    )

    assert record.range_category is None
    assert record.subproperty_of == "Has relation"
    assert record.is_page_type
    assert record.label == "Employer"



def test_property_normalizes_allowed_values() -> None:
    record = PropertyRecord(
        name="Has status",
        datatype="Text",
        allowed_values=("open", " closed ", "open", ""),
        allows_multiple_values=True,
    )

    assert record.allowed_values == ("open", "closed")
    assert record.has_allowed_values
    assert not record.is_page_type
