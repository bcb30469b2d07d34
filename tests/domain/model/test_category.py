from __future__ import annotations

from dataclasses import FrozenInstanceError, replace

import pytest

from semschema.domain.model import CategoryRecord, InvalidNameError


def test_category_promotes_overlapping_properties_to_required() -> None:
    record = CategoryRecord(
        name="Person",
        required_properties=("Has name", "Has age"),
        optional_properties=("Has email", "Has name"),
    )

    assert record.required_properties == ("Has name", "Has age")
    assert record.optional_properties == ("Has email",)
    assert record.promoted_properties == ("Has name",)


def test_category_promotes_subobjects_independently() -> None:
    record = CategoryRecord(
        name="Person",
        required_subobjects=("Address",),
        optional_subobjects=("Address", "Phone"),
        optional_properties=("Address",),
    )

    assert record.required_subobjects == ("Address",)
    assert record.optional_subobjects == ("Phone",)
    assert record.optional_properties == ("Address",)
    assert record.promoted_properties == ()


def test_category_defaults_label_to_name() -> None:
    record = CategoryRecord(name="  Person ")

    assert record.name == "Person"
    assert record.label == "Person"
    assert record.parents == ()


def test_category_rejects_self_parent() -> None:
    with pytest.raises(InvalidNameError, match="cannot be its own parent"):
        CategoryRecord(name="Person", parents=("Agent", "Person"))


def test_category_rejects_invalid_name() -> None:
    with pytest.raises(InvalidNameError):
        CategoryRecord(name="Per|son")


def test_category_rejects_invalid_parent_name() -> None:
    with pytest.raises(InvalidNameError, match=r"Parent category 'A\|B' contains"):
        CategoryRecord(name="Person", parents=("A|B",))


def test_category_is_immutable() -> None:
    record = CategoryRecord(name="Person")

    with pytest.raises(FrozenInstanceError):
        record.name = "Other"  # type: ignore[misc]


def test_replace_normalizes_again() -> None:
    record = CategoryRecord(name="Person", required_properties=("a",))

    changed = replace(record, optional_properties=("a", "b"))

    assert changed.optional_properties == ("b",)
    assert changed.promoted_properties == ("a",)


def test_promoted_names_do_not_affect_equality() -> None:
    promoted = CategoryRecord(name="X", required_properties=("a",), optional_properties=("a",))
    plain = CategoryRecord(name="X", required_properties=("a",))

    assert promoted == plain


def test_display_and_forms_are_read_only() -> None:
    record = CategoryRecord(name="Person", display={"header": ["Has name"]})

    with pytest.raises(TypeError):
        record.display["header"] = []  # type: ignore[index]
    assert record.display["header"] == ["Has name"]


def test_to_dict_omits_empty_optional_sections() -> None:
    record = CategoryRecord(name="Person", required_properties=("Has name",))

    assert record.to_dict() == {
        "parents": [],
        "label": "Person",
        "description": "",
        "properties": {"required": ["Has name"], "optional": []},
    }
