"""C3 linearization of category hierarchies and effective record folding.

The hierarchy is plain data: each record names its parents and the
``Linearizer`` walks those names explicitly. Results are memoized per category
name for the lifetime of one instance; construct a new instance for a new
category map.

Ordering contract:
- ``linearize(name)`` is most specific first, root-most last
- ``effective_record(name)`` folds that order root-first, so inherited
  attributes precede the category's own ones
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING

from semschema.domain.model import CategoryRecord

from .errors import (
    CycleError,
    InconsistentLinearizationError,
    ReferenceKind,
    ResolutionError,
    StructuralReferenceError,
)
from .merge import merge_records

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from semschema.domain.model import PropertyRecord, SubobjectRecord

log = logging.getLogger(__name__)


class Linearizer:
    """Resolve ancestor order and inherited attributes for categories."""

    def __init__(
        self,
        categories: Mapping[str, CategoryRecord],
        *,
        properties: Mapping[str, PropertyRecord] | None = None,
        subobjects: Mapping[str, SubobjectRecord] | None = None,
        allow_missing_parents: bool = False,
    ) -> None:
        self._categories = categories
        self._properties = properties
        self._subobjects = subobjects
        self._allow_missing_parents = allow_missing_parents
        self._linearizations: dict[str, tuple[str, ...]] = {}
        self._effective: dict[str, CategoryRecord] = {}

    @property
    def category_names(self) -> tuple[str, ...]:
        return tuple(self._categories)

    def has_category(self, name: str) -> bool:
        return name in self._categories

    def linearize(self, name: str) -> tuple[str, ...]:
        """Return ``name`` followed by its ancestors in C3 order.

        Unknown names linearize to themselves so forward references stay usable.
        Ancestors are linearized root-first with an explicit stack, so hierarchy
        depth is not bounded by the interpreter's recursion limit.
        """

        cached = self._linearizations.get(name)
        if cached is not None:
            return cached
        if name not in self._categories:
            return (name,)

        for pending in self._pending_ancestors(name):
            linearization = self._linearize_record(self._categories[pending])
            self._linearizations[pending] = linearization
            log.debug("Linearized %s: %s", pending, linearization)
        return self._linearizations[name]

    def own_record(self, name: str) -> CategoryRecord:
        """Return the declared record, or an empty one for unknown names."""

        record = self._categories.get(name)
        if record is None:
            return CategoryRecord(name=name)
        return record

    def ancestors(self, name: str) -> tuple[str, ...]:
        return self.linearize(name)[1:]

    def is_ancestor_of(self, ancestor: str, name: str) -> bool:
        return ancestor in self.ancestors(name)

    def effective_record(self, name: str) -> CategoryRecord:
        """Return the record for ``name`` with every ancestor's buckets folded in."""

        cached = self._effective.get(name)
        if cached is not None:
            return cached
        if name not in self._categories:
            return CategoryRecord(name=name)

        effective: CategoryRecord | None = None
        for ancestor in reversed(self.linearize(name)):
            own = self.own_record(ancestor)
            self._check_attribute_references(own)
            effective = own if effective is None else merge_records(effective, own)

        assert effective is not None
        self._effective[name] = effective
        return effective

    def validate(self) -> tuple[ResolutionError, ...]:
        """Linearize every category and collect failures instead of raising."""

        failures: list[ResolutionError] = []
        for name in self._categories:
            try:
                self.linearize(name)
            except ResolutionError as exc:
                failures.append(exc)
        return tuple(failures)

    def _linearize_record(self, record: CategoryRecord) -> tuple[str, ...]:
        if not record.parents:
            return (record.name,)

        sequences: list[list[str]] = []
        for parent in record.parents:
            if parent in self._categories:
                sequences.append(list(self.linearize(parent)))
            elif self._allow_missing_parents:
                sequences.append([parent])
            else:
                raise StructuralReferenceError(
                    category=record.name,
                    reference=parent,
                    kind=ReferenceKind.PARENT,
                )
        sequences.append(list(record.parents))

        try:
            merged = _c3_merge(sequences)
        except _NoCandidateError as exc:
            log.warning("Inconsistent hierarchy for %s: %s", record.name, exc.remaining)
            raise InconsistentLinearizationError(
                category=record.name,
                sequences=exc.remaining,
            ) from None
        return (record.name, *merged)

    def _pending_ancestors(self, start: str) -> list[str]:
        """Defined, not yet linearized categories reachable from ``start``, parents first.

        Iterative DFS that tracks the current path; reaching a category already on
        the path raises ``CycleError`` with the cycle starting at that category.
        """

        order: list[str] = []
        finished: set[str] = set()
        path: list[str] = []
        on_path: set[str] = set()
        stack: list[tuple[str, Iterator[str]]] = []

        def enter(current: str) -> None:
            path.append(current)
            on_path.add(current)
            stack.append((current, iter(self._categories[current].parents)))

        enter(start)
        while stack:
            current, parents = stack[-1]
            for parent in parents:
                if (
                    parent not in self._categories
                    or parent in self._linearizations
                    or parent in finished
                ):
                    continue
                if parent in on_path:
                    cycle = [*path[path.index(parent) :], parent]
                    log.warning("Cycle in category hierarchy: %s", " -> ".join(cycle))
                    raise CycleError(category=parent, path=cycle)
                enter(parent)
                break
            else:
                stack.pop()
                path.pop()
                on_path.discard(current)
                finished.add(current)
                order.append(current)
        return order

    def _check_attribute_references(self, record: CategoryRecord) -> None:
        if self._properties is not None:
            for property_name in record.all_properties:
                if property_name not in self._properties:
                    raise StructuralReferenceError(
                        category=record.name,
                        reference=property_name,
                        kind=ReferenceKind.PROPERTY,
                    )
        if self._subobjects is not None:
            for subobject_name in record.all_subobjects:
                if subobject_name not in self._subobjects:
                    raise StructuralReferenceError(
                        category=record.name,
                        reference=subobject_name,
                        kind=ReferenceKind.SUBOBJECT,
                    )


class _NoCandidateError(Exception):
    def __init__(self, remaining: list[list[str]]) -> None:
        self.remaining = remaining
        super().__init__(remaining)


def _c3_merge(sequences: Sequence[Sequence[str]]) -> tuple[str, ...]:
    """Merge linearizations with the C3 rule.

    Repeatedly takes the first head that appears in no other sequence's tail.
    Raises ``_NoCandidateError`` when no such head exists. ``heads`` points at
    each sequence's current head and ``in_tails`` counts the names still sitting
    behind a head, so a step costs one pass over the sequences.
    """

    remaining = [list(sequence) for sequence in sequences if sequence]
    heads = [0] * len(remaining)
    in_tails = Counter(name for sequence in remaining for name in sequence[1:])
    output: list[str] = []
    while True:
        live = [index for index, sequence in enumerate(remaining) if heads[index] < len(sequence)]
        if not live:
            return tuple(output)

        candidate = next(
            (
                remaining[index][heads[index]]
                for index in live
                if not in_tails[remaining[index][heads[index]]]
            ),
            None,
        )
        if candidate is None:
            raise _NoCandidateError([remaining[index][heads[index] :] for index in live])

        output.append(candidate)
        for index in live:
            sequence = remaining[index]
            if sequence[heads[index]] != candidate:
                continue
            heads[index] += 1
            if heads[index] < len(sequence):
                in_tails[sequence[heads[index]]] -= 1


__all__ = ["Linearizer"]
