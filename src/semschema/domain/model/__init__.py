"""Public schema record surface."""

from __future__ import annotations

from .category import CategoryRecord
from .naming import (
    INVALID_NAME_CHARACTERS,
    MAX_NAME_BYTES,
    InvalidNameError,
    generate_label,
    is_valid_name,
    normalize_name,
    normalize_names,
    promote_required,
)
from .property import PropertyRecord
from .subobject import SubobjectRecord

__all__ = [
    "INVALID_NAME_CHARACTERS",
    "MAX_NAME_BYTES",
    "CategoryRecord",
    "InvalidNameError",
    "PropertyRecord",
    "SubobjectRecord",
    "generate_label",
    "is_valid_name",
    "normalize_name",
    "normalize_names",
    "promote_required",
]
