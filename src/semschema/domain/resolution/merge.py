"""Pairwise merge of a parent's effective record into a child's own record."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from semschema.domain.model import CategoryRecord


def merge_buckets(
    parent_required: Sequence[str],
    parent_optional: Sequence[str],
    child_required: Sequence[str],
    child_optional: Sequence[str],
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Union both buckets; anything required on either side ends up required.

    Parent entries come first in their own order, followed by child entries
    not already present.
    """

    required = _ordered_union(parent_required, child_required)
    required_set = set(required)
    optional = tuple(
        name
        for name in _ordered_union(parent_optional, child_optional)
        if name not in required_set
    )
    return required, optional


def merge_records(parent_effective: CategoryRecord, child_own: CategoryRecord) -> CategoryRecord:
    """Return a new record with ``child_own``'s identity and merged buckets."""

    required_properties, optional_properties = merge_buckets(
        parent_effective.required_properties,
        parent_effective.optional_properties,
        child_own.required_properties,
        child_own.optional_properties,
    )
    required_subobjects, optional_subobjects = merge_buckets(
        parent_effective.required_subobjects,
        parent_effective.optional_subobjects,
        child_own.required_subobjects,
        child_own.optional_subobjects,
    )
    return replace(
        child_own,
        required_properties=required_properties,
        optional_properties=optional_properties,
        required_subobjects=required_subobjects,
        optional_subobjects=optional_subobjects,
    )


def _ordered_union(first: Sequence[str], second: Sequence[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    out: list[str] = []
    for name in (*first, *second):
        if name in seen:
            continue
        seen.add(name)
        out.append(name)
    return tuple(out)
