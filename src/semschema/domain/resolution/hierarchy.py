"""Hierarchy views: ancestor node graph plus attributes with their origin.

Used for visualizing a category's ancestry and for previewing what a category
that does not exist yet would inherit from a chosen set of parents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .linearize import Linearizer


@dataclass(frozen=True, slots=True, kw_only=True)
class InheritedAttribute:
    """One attribute together with the first category in C3 order declaring it."""

    name: str
    source_category: str
    required: bool


@dataclass(frozen=True, slots=True, kw_only=True)
class CategoryHierarchy:
    root: str
    nodes: dict[str, tuple[str, ...]] = field(default_factory=dict[str, tuple[str, ...]])
    inherited_properties: tuple[InheritedAttribute, ...] = ()
    inherited_subobjects: tuple[InheritedAttribute, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.nodes


def hierarchy_for(linearizer: Linearizer, name: str) -> CategoryHierarchy:
    """Describe an existing category; unknown names give an empty hierarchy."""

    if not linearizer.has_category(name):
        return CategoryHierarchy(root=name)

    ancestors = linearizer.linearize(name)
    nodes: dict[str, tuple[str, ...]] = {}
    for ancestor in ancestors:
        _collect_nodes(linearizer, ancestor, nodes)

    return CategoryHierarchy(
        root=name,
        nodes=nodes,
        inherited_properties=_collect(linearizer, [ancestors], kind="properties"),
        inherited_subobjects=_collect(linearizer, [ancestors], kind="subobjects"),
    )


def virtual_hierarchy_for(
    linearizer: Linearizer,
    name: str,
    parents: Sequence[str],
) -> CategoryHierarchy:
    """Describe a category that is not defined yet but would have ``parents``.

    Parents missing from the category map are dropped.
    """

    valid_parents = tuple(parent for parent in parents if linearizer.has_category(parent))
    nodes: dict[str, tuple[str, ...]] = {name: valid_parents}
    for parent in valid_parents:
        _collect_nodes(linearizer, parent, nodes)

    chains = [linearizer.linearize(parent) for parent in valid_parents]
    return CategoryHierarchy(
        root=name,
        nodes=nodes,
        inherited_properties=_collect(linearizer, chains, kind="properties"),
        inherited_subobjects=_collect(linearizer, chains, kind="subobjects"),
    )


def _collect_nodes(
    linearizer: Linearizer,
    name: str,
    nodes: dict[str, tuple[str, ...]],
) -> None:
    pending = [name]
    while pending:
        current = pending.pop()
        if current in nodes or not linearizer.has_category(current):
            continue
        parents = linearizer.own_record(current).parents
        nodes[current] = parents
        pending.extend(reversed(parents))


def _collect(
    linearizer: Linearizer,
    chains: Sequence[Sequence[str]],
    *,
    kind: Literal["properties", "subobjects"],
) -> tuple[InheritedAttribute, ...]:
    """Walk chains most-specific first; the first declaring category is the source.

    The required flag follows the required-wins rule over all walked categories.
    """

    sources: dict[str, str] = {}
    required: set[str] = set()
    for chain in chains:
        for category in chain:
            if not linearizer.has_category(category):
                continue
            record = linearizer.own_record(category)
            declared_required = getattr(record, f"required_{kind}")
            declared_optional = getattr(record, f"optional_{kind}")
            required.update(declared_required)
            for attribute in (*declared_required, *declared_optional):
                sources.setdefault(attribute, category)

    return tuple(
        InheritedAttribute(
            name=attribute,
            source_category=category,
            required=attribute in required,
        )
        for attribute, category in sources.items()
    )


__all__ = ["CategoryHierarchy", "InheritedAttribute", "hierarchy_for", "virtual_hierarchy_for"]
