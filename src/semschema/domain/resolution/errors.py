"""Errors raised while resolving category hierarchies.

Bucket overlap (an attribute both required and optional) is deliberately
absent: it is always resolved by promotion and never raised.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class ReferenceKind(StrEnum):
    """What kind of name a structural reference points to."""

    PARENT = "parent category"
    PROPERTY = "property"
    SUBOBJECT = "subobject"


class ResolutionError(ValueError):
    """Base class for hierarchy resolution failures of one category."""

    def __init__(self, message: str, *, category: str) -> None:
        self.category = category
        super().__init__(message)


class StructuralReferenceError(ResolutionError):
    """Raised when a category references a name absent from the supplied maps."""

    def __init__(self, *, category: str, reference: str, kind: ReferenceKind) -> None:
        self.reference = reference
        self.kind = kind
        super().__init__(
            f"Category '{category}' references undefined {kind.value} '{reference}'",
            category=category,
        )


class CycleError(ResolutionError):
    """Raised when a category is reachable from itself through its parents."""

    def __init__(self, *, category: str, path: Sequence[str]) -> None:
        self.path = tuple(path)
        super().__init__(
            f"Circular inheritance detected for '{category}': {' -> '.join(self.path)}",
            category=category,
        )


class InconsistentLinearizationError(ResolutionError):
    """Raised when C3 merge cannot pick a next ancestor for a category."""

    def __init__(self, *, category: str, sequences: Sequence[Sequence[str]]) -> None:
        self.sequences = tuple(tuple(sequence) for sequence in sequences)
        remaining = "; ".join(", ".join(sequence) for sequence in self.sequences if sequence)
        super().__init__(
            f"Inconsistent parent ordering for '{category}': cannot merge [{remaining}]",
            category=category,
        )


__all__ = [
    "CycleError",
    "InconsistentLinearizationError",
    "ReferenceKind",
    "ResolutionError",
    "StructuralReferenceError",
]
