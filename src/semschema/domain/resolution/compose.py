"""Compose several categories' effective records into one result.

Attribute identity is global: a property or subobject name denotes one shared
definition, so no datatype conflict detection happens here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .linearize import Linearizer
from .result import ResolutionResult

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from semschema.domain.model import CategoryRecord

log = logging.getLogger(__name__)


@dataclass(slots=True)
class _BucketAccumulator:
    """Collects one attribute kind across categories in first-seen order."""

    required: list[str] = field(default_factory=list[str])
    optional: list[str] = field(default_factory=list[str])
    sources: dict[str, list[str]] = field(default_factory=dict[str, list[str]])

    def add(self, category: str, required: Sequence[str], optional: Sequence[str]) -> None:
        for name in required:
            if name not in self.required:
                self.required.append(name)
            self._record_source(name, category)
        for name in optional:
            if name not in self.required and name not in self.optional:
                self.optional.append(name)
            self._record_source(name, category)

    def finish(self) -> tuple[tuple[str, ...], tuple[str, ...], dict[str, tuple[str, ...]]]:
        # a later category may require what an earlier one declared optional
        required = tuple(self.required)
        required_set = set(required)
        optional = tuple(name for name in self.optional if name not in required_set)
        sources = {name: tuple(categories) for name, categories in self.sources.items()}
        return required, optional, sources

    def _record_source(self, name: str, category: str) -> None:
        categories = self.sources.setdefault(name, [])
        if category not in categories:
            categories.append(category)


class CategoryComposer:
    """Resolve properties and subobjects across one or more categories."""

    def __init__(self, linearizer: Linearizer) -> None:
        self._linearizer = linearizer

    def resolve(self, category_names: Sequence[str]) -> ResolutionResult:
        """Merge the effective records of ``category_names`` in input order.

        Unknown names are kept in ``category_names`` but contribute nothing.
        Cycles, inconsistent hierarchies and missing references propagate from
        the linearizer.
        """

        names = tuple(category_names)
        if not names:
            return ResolutionResult.empty()

        properties = _BucketAccumulator()
        subobjects = _BucketAccumulator()
        for name in names:
            if not self._linearizer.has_category(name):
                log.debug("Category %s is not defined; contributing nothing", name)
                continue
            effective = self._linearizer.effective_record(name)
            properties.add(name, effective.required_properties, effective.optional_properties)
            subobjects.add(name, effective.required_subobjects, effective.optional_subobjects)

        required_properties, optional_properties, property_sources = properties.finish()
        required_subobjects, optional_subobjects, subobject_sources = subobjects.finish()
        return ResolutionResult(
            required_properties=required_properties,
            optional_properties=optional_properties,
            property_sources=property_sources,
            required_subobjects=required_subobjects,
            optional_subobjects=optional_subobjects,
            subobject_sources=subobject_sources,
            category_names=names,
        )


def resolve_categories(
    categories: Mapping[str, CategoryRecord],
    category_names: Sequence[str],
    **linearizer_options: Any,
) -> ResolutionResult:
    """Build a fresh linearizer over ``categories`` and resolve ``category_names``."""

    linearizer = Linearizer(categories, **linearizer_options)
    return CategoryComposer(linearizer).resolve(category_names)


__all__ = ["CategoryComposer", "resolve_categories"]
