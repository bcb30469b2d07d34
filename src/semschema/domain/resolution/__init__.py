"""Inheritance resolution core.

Flow:
1) ``Linearizer`` computes the C3 ancestor order of one category
2) ``merge_records`` folds that order root-first into an effective record
3) ``CategoryComposer`` merges several effective records with source attribution
"""

from __future__ import annotations

from .compose import CategoryComposer, resolve_categories
from .errors import (
    CycleError,
    InconsistentLinearizationError,
    ReferenceKind,
    ResolutionError,
    StructuralReferenceError,
)
from .hierarchy import CategoryHierarchy, InheritedAttribute, hierarchy_for, virtual_hierarchy_for
from .linearize import Linearizer
from .merge import merge_buckets, merge_records
from .result import ResolutionResult

__all__ = [
    "CategoryComposer",
    "CategoryHierarchy",
    "CycleError",
    "InconsistentLinearizationError",
    "InheritedAttribute",
    "Linearizer",
    "ReferenceKind",
    "ResolutionError",
    "ResolutionResult",
    "StructuralReferenceError",
    "hierarchy_for",
    "merge_buckets",
    "merge_records",
    "resolve_categories",
    "virtual_hierarchy_for",
]
