from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from semschema.domain.model import CategoryRecord, PropertyRecord, SubobjectRecord
from semschema.domain.resolution import (
    CycleError,
    InconsistentLinearizationError,
    Linearizer,
    ReferenceKind,
    StructuralReferenceError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable


def _categories(*records: CategoryRecord) -> dict[str, CategoryRecord]:
    return {record.name: record for record in records}


def _chain(records: Iterable[tuple[str, tuple[str, ...]]]) -> dict[str, CategoryRecord]:
    return _categories(*(CategoryRecord(name=name, parents=parents) for name, parents in records))


def test_root_linearizes_to_itself() -> None:
    linearizer = Linearizer(_chain([("Thing", ())]))

    assert linearizer.linearize("Thing") == ("Thing",)
    assert linearizer.ancestors("Thing") == ()


def test_diamond_follows_c3_order() -> None:
    linearizer = Linearizer(
        _chain(
            [
                ("O", ()),
                ("A", ("O",)),
                ("B", ("O",)),
                ("C", ("A", "B")),
            ]
        )
    )

    assert linearizer.linearize("C") == ("C", "A", "B", "O")


def test_disjoint_parents_keep_declaration_order() -> None:
    linearizer = Linearizer(
        _chain(
            [
                ("X", ()),
                ("Y", ()),
                ("A", ("X",)),
                ("B", ("Y",)),
                ("C", ("A", "B")),
            ]
        )
    )

    assert linearizer.linearize("C") == ("C", "A", "X", "B", "Y")


def test_classic_c3_example() -> None:
    linearizer = Linearizer(
        _chain(
            [
                ("O", ()),
                ("A", ("O",)),
                ("B", ("O",)),
                ("C", ("O",)),
                ("D", ("O",)),
                ("E", ("O",)),
                ("K1", ("A", "B", "C")),
                ("K2", ("D", "B", "E")),
                ("K3", ("D", "A")),
                ("Z", ("K1", "K2", "K3")),
            ]
        )
    )

    assert linearizer.linearize("Z") == ("Z", "K1", "K2", "K3", "D", "A", "B", "C", "E", "O")


def test_cycle_raises_for_every_member() -> None:
    linearizer = Linearizer(_chain([("A", ("B",)), ("B", ("A",))]))

    with pytest.raises(CycleError) as exc:
        linearizer.linearize("A")
    assert exc.value.path == ("A", "B", "A")
    assert "A -> B -> A" in str(exc.value)

    with pytest.raises(CycleError):
        linearizer.linearize("B")


def test_cycle_does_not_poison_unrelated_categories() -> None:
    linearizer = Linearizer(
        _chain([("A", ("B",)), ("B", ("A",)), ("Root", ()), ("Leaf", ("Root",))])
    )

    with pytest.raises(CycleError):
        linearizer.linearize("A")

    assert linearizer.linearize("Leaf") == ("Leaf", "Root")


def test_descendant_of_cycle_fails() -> None:
    linearizer = Linearizer(_chain([("A", ("B",)), ("B", ("C",)), ("C", ("B",))]))

    with pytest.raises(CycleError) as exc:
        linearizer.linearize("A")
    assert exc.value.category == "B"


def test_inconsistent_parent_order_raises() -> None:
    linearizer = Linearizer(
        _chain(
            [
                ("X", ()),
                ("Y", ("X",)),
                ("Z", ("X", "Y")),
            ]
        )
    )

    with pytest.raises(
        InconsistentLinearizationError, match="Inconsistent parent ordering for 'Z'"
    ):
        linearizer.linearize("Z")


def test_missing_parent_is_structural_error() -> None:
    linearizer = Linearizer(_chain([("Person", ("Agent",))]))

    with pytest.raises(StructuralReferenceError) as exc:
        linearizer.linearize("Person")
    assert exc.value.reference == "Agent"
    assert exc.value.kind is ReferenceKind.PARENT
    assert str(exc.value) == "Category 'Person' references undefined parent category 'Agent'"


def test_missing_parent_is_tolerated_when_allowed() -> None:
    categories = _categories(
        CategoryRecord(name="Person", parents=("Agent",), required_properties=("Has name",))
    )
    linearizer = Linearizer(categories, allow_missing_parents=True)

    assert linearizer.linearize("Person") == ("Person", "Agent")
    assert linearizer.effective_record("Person").required_properties == ("Has name",)


def test_unknown_category_linearizes_to_itself() -> None:
    linearizer = Linearizer({})

    assert linearizer.linearize("Ghost") == ("Ghost",)
    assert linearizer.effective_record("Ghost") == CategoryRecord(name="Ghost")
    assert not linearizer.has_category("Ghost")


def test_linearization_is_memoized() -> None:
    linearizer = Linearizer(_chain([("Root", ()), ("Leaf", ("Root",))]))

    first = linearizer.linearize("Leaf")
    second = linearizer.linearize("Leaf")

    assert first is second


def test_effective_record_folds_root_first() -> None:
    categories = _categories(
        CategoryRecord(name="Agent", required_properties=("Has name",)),
        CategoryRecord(
            name="Person",
            parents=("Agent",),
            required_properties=("Has birthday",),
            optional_properties=("Has name", "Has email"),
        ),
        CategoryRecord(
            name="Employee",
            parents=("Person",),
            required_properties=("Has email",),
            optional_subobjects=("Address",),
        ),
    )
    linearizer = Linearizer(categories)

    effective = linearizer.effective_record("Employee")

    assert effective.name == "Employee"
    assert effective.required_properties == ("Has name", "Has birthday", "Has email")
    assert effective.optional_properties == ()
    assert effective.optional_subobjects == ("Address",)
    assert linearizer.effective_record("Employee") is effective


def test_effective_record_checks_attribute_references() -> None:
    categories = _categories(
        CategoryRecord(name="Agent", required_properties=("Has name",)),
        CategoryRecord(name="Person", parents=("Agent",), optional_subobjects=("Address",)),
    )
    linearizer = Linearizer(
        categories,
        properties={"Has name": PropertyRecord(name="Has name", datatype="Text")},
        subobjects={},
    )

    with pytest.raises(StructuralReferenceError) as exc:
        linearizer.effective_record("Person")
    assert exc.value.kind is ReferenceKind.SUBOBJECT
    assert exc.value.category == "Person"


def test_effective_record_reports_declaring_ancestor() -> None:
    categories = _categories(
        CategoryRecord(name="Agent", required_properties=("Has name",)),
        CategoryRecord(name="Person", parents=("Agent",)),
    )
    linearizer = Linearizer(
        categories,
        properties={},
        subobjects={"Address": SubobjectRecord(name="Address")},
    )

    with pytest.raises(StructuralReferenceError) as exc:
        linearizer.effective_record("Person")
    assert exc.value.category == "Agent"
    assert exc.value.reference == "Has name"


def test_is_ancestor_of() -> None:
    linearizer = Linearizer(_chain([("Root", ()), ("Mid", ("Root",)), ("Leaf", ("Mid",))]))

    assert linearizer.is_ancestor_of("Root", "Leaf")
    assert not linearizer.is_ancestor_of("Leaf", "Root")
    assert not linearizer.is_ancestor_of("Leaf", "Leaf")


def test_validate_collects_failures() -> None:
    linearizer = Linearizer(
        _chain([("A", ("B",)), ("B", ("A",)), ("Orphan", ("Missing",)), ("Fine", ())])
    )

    failures = linearizer.validate()

    assert {type(failure) for failure in failures} == {CycleError, StructuralReferenceError}
    assert {failure.category for failure in failures} == {"A", "B", "Orphan"}


def test_deep_chain_linearizes_without_recursion_limit() -> None:
    depth = 3000
    chain = [("C0", ())] + [(f"C{index}", (f"C{index - 1}",)) for index in range(1, depth)]
    linearizer = Linearizer(_chain(chain))

    leaf = f"C{depth - 1}"
    order = linearizer.linearize(leaf)

    assert len(order) == depth
    assert order[0] == leaf
    assert order[-1] == "C0"
    assert linearizer.validate() == ()


def test_deep_cycle_is_reported_without_recursion_limit() -> None:
    depth = 3000
    chain = [(f"C{index}", (f"C{(index + 1) % depth}",)) for index in range(depth)]
    linearizer = Linearizer(_chain(chain))

    with pytest.raises(CycleError) as excinfo:
        linearizer.linearize("C0")

    assert excinfo.value.category == "C0"
    assert len(excinfo.value.path) == depth + 1
